"""Sample changelogs for SCM adapter tests."""

import pytest

FIRST_SHA = "3b7e1f0c9d8a7b6c5d4e3f2a1b0c9d8e7f6a5b4c"
SECOND_SHA = "5d2e8a1b3c4d5e6f708192a3b4c5d6e7f8091a2b"


@pytest.fixture
def git_changelog() -> str:
    """Raw git changelog with a bot commit followed by a developer commit."""
    return (
        f"commit {FIRST_SHA}\n"
        "tree 9a0c1b2d3e4f5a6b7c8d9e0f1a2b3c4d5e6f7a8b\n"
        "parent 0000000000000000000000000000000000000001\n"
        "author Release Bot <Bot@CI.example.com> 1530000000 +1000\n"
        "committer Release Bot <bot@ci.example.com> 1530000000 +1000\n"
        "\n"
        "    Bump version to 1.2.3\n"
        "\n"
        ":100644 100644 1111111111111111111111111111111111111111 "
        "2222222222222222222222222222222222222222 M\tpom.xml\n"
        "\n"
        f"commit {SECOND_SHA}\n"
        "tree 8b9c0d1e2f3a4b5c6d7e8f9a0b1c2d3e4f5a6b7c\n"
        f"parent {FIRST_SHA}\n"
        "author Jane Doe <jane@example.com> 1530003600 -0230\n"
        "committer Jane Doe <jane@example.com> 1530003600 -0230\n"
        "\n"
        "    Fix parser\n"
        "    \n"
        "    Handle empty input.\n"
        "\n"
        ":100644 100644 3333333333333333333333333333333333333333 "
        "4444444444444444444444444444444444444444 M\tsrc/parser.py\n"
    )


@pytest.fixture
def svn_log_xml() -> str:
    """svn log --xml output with two entries, the second without an author."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        "<log>\n"
        '<logentry revision="41">\n'
        "<author>buildbot</author>\n"
        "<date>2018-06-26T08:00:00.123456Z</date>\n"
        "<msg>[maven-release-plugin] prepare release</msg>\n"
        "</logentry>\n"
        '<logentry revision="42">\n'
        "<date>2018-06-26T09:30:00.000000Z</date>\n"
        "<msg>Import vendor drop</msg>\n"
        "</logentry>\n"
        "</log>\n"
    )
