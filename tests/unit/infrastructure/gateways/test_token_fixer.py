"""Tests for TokenFixer: changeset lifecycle, conflicts and materialization."""

import pytest

from operator_spacing_linter.domain.entities import EditType
from operator_spacing_linter.domain.tokens import TokenKind
from operator_spacing_linter.infrastructure.gateways.token_fixer import ChangesetError, TokenFixer
from tests.token_helpers import lex


@pytest.fixture
def fixer() -> TokenFixer:
    return TokenFixer(lex("$a=1;"))


class TestChangesetLifecycle:
    def test_committed_changeset_is_applied(self, fixer: TokenFixer) -> None:
        fixer.begin_changeset()
        fixer.add_content_before(1, " ")
        assert fixer.end_changeset() is True
        assert fixer.get_contents() == "$a =1;"
        assert fixer.changesets_applied == 1
        assert fixer.has_changes()

    def test_edits_in_one_changeset_apply_together(self, fixer: TokenFixer) -> None:
        fixer.begin_changeset()
        fixer.add_content_before(1, " ")
        fixer.add_content(1, " ")
        fixer.end_changeset()
        assert fixer.get_contents() == "$a = 1;"
        assert fixer.changesets_applied == 1

    def test_nested_begin_raises(self, fixer: TokenFixer) -> None:
        fixer.begin_changeset()
        with pytest.raises(ChangesetError, match="cannot be nested"):
            fixer.begin_changeset()

    def test_end_without_begin_raises(self, fixer: TokenFixer) -> None:
        with pytest.raises(ChangesetError):
            fixer.end_changeset()

    def test_rollback_without_begin_raises(self, fixer: TokenFixer) -> None:
        with pytest.raises(ChangesetError):
            fixer.rollback_changeset()

    def test_edit_outside_changeset_raises(self, fixer: TokenFixer) -> None:
        with pytest.raises(ChangesetError, match="inside a changeset"):
            fixer.replace_token(0, "$b")

    def test_edit_with_bad_index_raises(self, fixer: TokenFixer) -> None:
        fixer.begin_changeset()
        with pytest.raises(ValueError, match="out of range"):
            fixer.add_content(42, " ")

    def test_rollback_discards_pending_edits(self, fixer: TokenFixer) -> None:
        fixer.begin_changeset()
        fixer.add_content(1, " ")
        fixer.rollback_changeset()
        assert not fixer.in_changeset
        assert not fixer.has_changes()
        assert fixer.get_contents() == "$a=1;"

    def test_empty_changeset_commits_nothing(self, fixer: TokenFixer) -> None:
        fixer.begin_changeset()
        assert fixer.end_changeset() is True
        assert not fixer.has_changes()
        assert fixer.changesets_applied == 0


class TestChangesetContextManager:
    def test_commits_on_normal_exit(self, fixer: TokenFixer) -> None:
        with fixer.changeset():
            fixer.add_content(1, " ")
        assert fixer.get_contents() == "$a= 1;"
        assert not fixer.in_changeset

    def test_empty_body_is_balanced(self, fixer: TokenFixer) -> None:
        with fixer.changeset():
            pass
        assert not fixer.in_changeset
        assert not fixer.has_changes()

    def test_rolls_back_and_reraises(self, fixer: TokenFixer) -> None:
        with pytest.raises(KeyError):
            with fixer.changeset():
                fixer.add_content(1, " ")
                raise KeyError("boom")
        assert not fixer.in_changeset
        assert not fixer.has_changes()


class TestConflicts:
    def test_second_changeset_on_same_token_is_rejected(self, fixer: TokenFixer) -> None:
        with fixer.changeset():
            fixer.add_content_before(1, " ")
        fixer.begin_changeset()
        fixer.add_content(1, " ")
        assert fixer.end_changeset() is False
        assert fixer.changesets_rejected == 1
        assert fixer.changesets_applied == 1
        assert fixer.get_contents() == "$a =1;"

    def test_rejection_is_all_or_nothing(self, fixer: TokenFixer) -> None:
        with fixer.changeset():
            fixer.replace_token(3, ";;")
        with fixer.changeset():
            fixer.add_content(1, " ")
            fixer.replace_token(3, ";")
        assert fixer.get_contents() == "$a=1;;"
        assert fixer.changesets_rejected == 1

    def test_disjoint_changesets_both_apply(self, fixer: TokenFixer) -> None:
        with fixer.changeset():
            fixer.replace_token(0, "$b")
        with fixer.changeset():
            fixer.replace_token(2, "2")
        assert fixer.get_contents() == "$b=2;"
        assert fixer.changesets_rejected == 0


class TestMaterialization:
    def test_changesets_record_edits(self, fixer: TokenFixer) -> None:
        with fixer.changeset():
            fixer.add_content_before(1, " ")
        [changeset] = fixer.changesets
        assert changeset.indices == frozenset({1})
        assert changeset.edits[0].edit_type is EditType.INSERT_BEFORE
        assert changeset.edits[0].text == " "
        assert not changeset.is_empty()

    def test_replace_token(self) -> None:
        fixer = TokenFixer(lex("$a  = 1;"))
        with fixer.changeset():
            fixer.replace_token(1, " ")
        assert fixer.token_content(1) == " "
        assert fixer.get_contents() == "$a = 1;"

    def test_fixed_stream_splits_inserted_whitespace(self, fixer: TokenFixer) -> None:
        with fixer.changeset():
            fixer.add_content_before(1, " ")
        stream = fixer.fixed_stream()
        assert [t.kind for t in stream] == [
            TokenKind.VARIABLE,
            TokenKind.WHITESPACE,
            TokenKind.EQUAL,
            TokenKind.LNUMBER,
            TokenKind.SEMICOLON,
        ]
        assert stream[2].column == 4
        assert stream.filename == "test.php"

    def test_fixed_stream_merges_adjacent_whitespace(self) -> None:
        fixer = TokenFixer(lex("$a= 1;"))
        with fixer.changeset():
            fixer.add_content(1, " ")
        stream = fixer.fixed_stream()
        assert stream[2].content == "  "
        assert stream.content == "$a=  1;"

    def test_non_whitespace_insertion_joins_token(self, fixer: TokenFixer) -> None:
        with fixer.changeset():
            fixer.add_content(0, "x")
        stream = fixer.fixed_stream()
        assert stream[0].content == "$ax"
        assert stream[0].kind is TokenKind.VARIABLE

    def test_fixed_stream_rebuilds_bracket_index(self) -> None:
        fixer = TokenFixer(lex("foo($a);"))
        with fixer.changeset():
            fixer.add_content(1, " ")
        stream = fixer.fixed_stream()
        assert stream.matching_bracket(1) == 4
        assert stream.enclosing_parenthesis(3) == 1
