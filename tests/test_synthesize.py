"""
Tests for synthesis entry points — template, flat list, tree.
"""

import textwrap

import pytest

from treesmith.adapters.mock import MockFilesystemProvider
from treesmith.core.data import TemplateCatalog
from treesmith.core.errors import EmptyPlanError, SynthesisError, TemplateNotFoundError
from treesmith.core.use_cases.synthesize import (
    plan_from_flat_list,
    plan_from_template,
    plan_from_tree,
    synthesize_from_flat_list,
    synthesize_from_template,
    synthesize_from_tree,
)

# ── Template ─────────────────────────────────────────────────────────


class TestFromTemplate:
    def test_plan(self, small_catalog: TemplateCatalog):
        plan = plan_from_template("tiny", "proj", catalog=small_catalog)
        assert [e.path for e in plan.entries] == [
            "proj", "proj/docs", "proj/src", "proj/src/lib",
            "proj/README.md", "proj/src/main.py",
        ]

    def test_synthesize(self, small_catalog, mock_provider: MockFilesystemProvider):
        report = synthesize_from_template("tiny", "proj", mock_provider, catalog=small_catalog)
        assert report.all_ok
        assert report.total == 6
        assert mock_provider.paths("write_file") == ["proj/README.md"]

    def test_root_only_template(self, small_catalog, mock_provider):
        report = synthesize_from_template("empty", "bare", mock_provider, catalog=small_catalog)
        assert report.total == 1
        assert mock_provider.paths() == ["bare"]

    def test_unknown_template_makes_no_calls(self, small_catalog, mock_provider):
        with pytest.raises(TemplateNotFoundError):
            synthesize_from_template("nope", "proj", mock_provider, catalog=small_catalog)
        assert mock_provider.call_count == 0

    def test_blank_root(self, small_catalog, mock_provider):
        with pytest.raises(SynthesisError, match="Root directory is required"):
            synthesize_from_template("tiny", "  ", mock_provider, catalog=small_catalog)
        assert mock_provider.call_count == 0

    @pytest.mark.parametrize("root", ["/", "//", " / "])
    def test_slash_only_root(self, small_catalog, mock_provider, root: str):
        with pytest.raises(SynthesisError, match="Root directory is required"):
            synthesize_from_template("tiny", root, mock_provider, catalog=small_catalog)
        assert mock_provider.call_count == 0

    def test_root_trailing_slash_trimmed(self, small_catalog):
        plan = plan_from_template("tiny", "proj/", catalog=small_catalog)
        assert plan.root == "proj"
        assert plan.entries[0].path == "proj"

    def test_bundled_catalog_by_default(self, mock_provider):
        report = synthesize_from_template("go-project", "svc", mock_provider)
        assert report.total == 16
        assert report.all_ok
        assert mock_provider.paths()[0] == "svc"


# ── Flat list ────────────────────────────────────────────────────────


class TestFromFlatList:
    def test_plan_without_root(self):
        plan = plan_from_flat_list(None, "f:b.txt\nd:a/x\nd:a\n")
        assert [e.path for e in plan.entries] == ["a", "a/x", "b.txt"]

    def test_synthesize_with_root(self, mock_provider):
        report = synthesize_from_flat_list("out", "d:src\nf:src/app.py\n", mock_provider)
        assert report.success_count == 3
        assert mock_provider.paths() == ["out", "out/src", "out/src/app.py"]

    def test_empty_list_raises_before_any_call(self, mock_provider):
        with pytest.raises(EmptyPlanError):
            synthesize_from_flat_list(None, "nothing here\n", mock_provider)
        assert mock_provider.call_count == 0

    def test_empty_list_with_root_creates_root(self, mock_provider):
        report = synthesize_from_flat_list("just-root", "", mock_provider)
        assert report.total == 1


# ── Tree ─────────────────────────────────────────────────────────────


class TestFromTree:
    TREE = textwrap.dedent("""\
        myapp/
        ├── src/
        │   ├── main.go
        │   └── utils.go
        └── README.md
    """)

    def test_plan(self):
        plan = plan_from_tree(self.TREE)
        assert plan.to_flat_list() == (
            "d:myapp\nd:myapp/src\n"
            "f:myapp/src/main.go\nf:myapp/src/utils.go\nf:myapp/README.md"
        )

    def test_synthesize_with_failure(self, mock_provider):
        mock_provider.set_failure("myapp/src/utils.go")
        report = synthesize_from_tree(self.TREE, mock_provider)
        assert report.success_count == 4
        assert report.failure_count == 1

    def test_empty_tree(self, mock_provider):
        with pytest.raises(EmptyPlanError):
            synthesize_from_tree("\n \n", mock_provider)
        assert mock_provider.call_count == 0
