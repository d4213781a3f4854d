"""Shared fixtures for yarn-delta tests."""

import textwrap

import pytest

METADATA = """\
__metadata:
  version: 6
  cacheKey: 8
"""


def make_lockfile(*entries: str) -> str:
    """Build lockfile text from a metadata header and dedented entry blocks."""
    blocks = [METADATA] + [textwrap.dedent(entry) for entry in entries]
    return "\n".join(blocks)


@pytest.fixture
def word_wrap_entry():
    return '''\
    "@aashutoshrathi/word-wrap@npm:^1.2.3":
      version: 1.2.6
      resolution: "@aashutoshrathi/word-wrap@npm:1.2.6"
      checksum: ada901b9e7c680d190f1d012c84217ce0063d8f5c5a7725bb91ec3c5ed99bb7572680eb2d2938a531ccbaec39a95422fcd8a6b4a13110c7d98dd75402f66a0cd
      languageName: node
      linkType: hard
    '''


@pytest.fixture
def local_entry():
    return '''\
    "some-package@npm:^1.2.3":
      version: 0.0.0-use.local
      resolution: "some-package@workspace:packages/some-package"
      languageName: unknown
      linkType: soft
    '''


@pytest.fixture
def before_lockfile(tmp_path, word_wrap_entry):
    """Create a lockfile with two packages."""
    lockfile = tmp_path / "before" / "yarn.lock"
    lockfile.parent.mkdir()
    lockfile.write_text(make_lockfile(
        word_wrap_entry,
        '''\
        "lodash@npm:^4.17.19":
          version: 4.17.20
          languageName: node
          linkType: hard
        ''',
    ))
    return lockfile


@pytest.fixture
def after_lockfile(tmp_path, word_wrap_entry):
    """Create a lockfile where lodash was bumped and left-pad added."""
    lockfile = tmp_path / "after" / "yarn.lock"
    lockfile.parent.mkdir()
    lockfile.write_text(make_lockfile(
        word_wrap_entry,
        '''\
        "lodash@npm:^4.17.19":
          version: 4.17.21
          languageName: node
          linkType: hard
        ''',
        '''\
        "left-pad@npm:^1.3.0":
          version: 1.3.0
          languageName: node
          linkType: hard
        ''',
    ))
    return lockfile
