"""
Tests for the tree-text parser — tokenizing, depth inference, paths.
"""

import textwrap

import pytest

from treesmith.core.services.tree_parser import (
    TreeToken,
    has_file_extension,
    parse_tree_text,
    tokenize_tree,
)

# ── File extension heuristic ─────────────────────────────────────────


class TestHasFileExtension:
    @pytest.mark.parametrize("name", [
        "main.go", "README.md", "App.JAVA", "config.yaml", "Cargo.lock",
        "archive.tar.gz", "image.png", "notes.v2",
    ])
    def test_files(self, name: str):
        assert has_file_extension(name) is True

    @pytest.mark.parametrize("name", [
        "src", "Makefile", ".gitignore", ".github", "trailing.", "weird.a",
        "name.verylongextension",
    ])
    def test_directories(self, name: str):
        assert has_file_extension(name) is False

    def test_non_alphanumeric_extension(self):
        assert has_file_extension("file.t-t") is False


# ── Tokenizer ────────────────────────────────────────────────────────


class TestTokenizeTree:
    def test_first_line_is_root(self):
        tokens = tokenize_tree("   myapp/\n├── src/\n")
        assert tokens[0] == TreeToken(depth=0, name="myapp", line_number=1)
        assert tokens[1].depth == 1

    def test_depth_follows_vertical_runs(self):
        text = textwrap.dedent("""\
            root/
            ├── a/
            │   ├── b/
            │   │   └── c.txt
            │   └── d.txt
            └── e.md
        """)
        depths = [(t.name, t.depth) for t in tokenize_tree(text)]
        assert depths == [
            ("root", 0), ("a", 1), ("b", 2), ("c.txt", 3), ("d.txt", 2), ("e.md", 1),
        ]

    def test_plain_indent_lands_at_depth_one(self):
        tokens = tokenize_tree("root\n        deep.txt\n")
        assert tokens[1].depth == 1

    def test_skips_blank_comment_and_connector_lines(self):
        text = "root/\n\n│\n# just a comment\n├── \n└── keep.txt\n"
        tokens = tokenize_tree(text)
        assert [t.name for t in tokens] == ["root", "keep.txt"]
        assert tokens[1].line_number == 6

    def test_strips_comments_and_trailing_slash(self):
        tokens = tokenize_tree("root/   # the root\n├── src/  # sources\n")
        assert [t.name for t in tokens] == ["root", "src"]

    def test_no_break_spaces_from_tree_output(self):
        text = "root\n├── a\n│\u00a0\u00a0 └── b.txt\n"
        tokens = tokenize_tree(text)
        assert tokens[2].depth == 2
        assert tokens[2].name == "b.txt"

    def test_short_connectors(self):
        tokens = tokenize_tree("root\n├─ a\n└─ b.md\n")
        assert [(t.name, t.depth) for t in tokens] == [("root", 0), ("a", 1), ("b.md", 1)]

    def test_empty_text(self):
        assert tokenize_tree("") == []
        assert tokenize_tree("\n   \n") == []


# ── Parser ───────────────────────────────────────────────────────────


class TestParseTreeText:
    def test_example_diagram(self):
        text = textwrap.dedent("""\
            myapp/
            ├── src/
            │   ├── main.go
            │   └── utils.go
            └── README.md
        """)
        structure = parse_tree_text(text)
        assert structure.directories == {"myapp", "myapp/src"}
        assert list(structure.files) == [
            "myapp/src/main.go", "myapp/src/utils.go", "myapp/README.md",
        ]
        assert all(content == "" for content in structure.files.values())

    def test_file_does_not_become_parent(self):
        text = "root\n├── a.txt\n│   └── b.txt\n"
        structure = parse_tree_text(text)
        assert "root/b.txt" in structure.files
        assert "root/a.txt/b.txt" not in structure.files

    def test_sibling_after_nested_directory(self):
        text = textwrap.dedent("""\
            proj
            ├── one/
            │   └── two/
            │       └── deep.py
            └── three/
        """)
        structure = parse_tree_text(text)
        assert structure.directories == {
            "proj", "proj/one", "proj/one/two", "proj/three",
        }
        # One │ marker puts the file at depth 2, beside "two".
        assert "proj/one/deep.py" in structure.files

    def test_makefile_is_a_directory(self):
        structure = parse_tree_text("proj\n├── Makefile\n")
        assert "proj/Makefile" in structure.directories

    def test_single_root(self):
        structure = parse_tree_text("only/\n")
        assert structure.directories == {"only"}
        assert structure.files == {}

    def test_empty(self):
        assert parse_tree_text("").is_empty
