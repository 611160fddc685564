"""Tests for the line classifier."""

from gitwrap.parsers import patterns


class TestEntryPatterns:
    def test_modified(self):
        assert patterns.MODIFIED.matches("#  modified:   patttrn06")
        assert patterns.MODIFIED.matches("# modified:   dir1/dir2/dir3/foobar07")
        assert not patterns.MODIFIED.matches("# xyz modified: pattern06")

    def test_new_file(self):
        assert patterns.NEW_FILE.matches("#  new file:   foobar03")
        assert patterns.NEW_FILE.matches("#       new file:                  foobar03")
        assert patterns.NEW_FILE.matches("#  new file:   dir1/dir2/dir3/foobar07")
        assert not patterns.NEW_FILE.matches("# xyz new file: pattern06")

    def test_deleted(self):
        assert patterns.DELETED.matches("# deleted:    foobar03")
        assert patterns.DELETED.matches("#       deleted:                  foobar03")
        assert not patterns.DELETED.matches("# xyz deleted: pattern06")

    def test_keyword_needs_comment_marker(self):
        assert not patterns.MODIFIED.matches("modified:   foo.txt")

    def test_filename_with_spaces(self):
        assert patterns.MODIFIED.payload("# modified: xyz pattern06") == "xyz pattern06"
        assert patterns.NEW_FILE.payload("# new file: xyz pattern06") == "xyz pattern06"

    def test_entry_extraction(self):
        assert patterns.match_entry("# deleted:    foobar03") == (patterns.DELETED, "foobar03")
        assert patterns.match_entry("#  new file:   foobar04") == (patterns.NEW_FILE, "foobar04")
        assert patterns.match_entry("#  new file:   testDir1/foobar04")[1] == "testDir1/foobar04"
        assert patterns.match_entry("#\trenamed:    a -> b") == (patterns.RENAMED, "a -> b")
        assert patterns.match_entry("# fileB") is None

    def test_trailing_spaces_kept_carriage_return_dropped(self):
        assert patterns.match_entry("# modified:   a.txt  \r")[1] == "a.txt  "
        assert patterns.match_entry("# modified:   a.txt\r")[1] == "a.txt"
        assert patterns.COMMENT.payload("#\tnotes.txt ") == "notes.txt "

    def test_split_rename(self):
        assert patterns.split_rename("README.md -> DOC.md") == ("README.md", "DOC.md")
        assert patterns.split_rename("README.md") is None


class TestCommentLines:
    def test_empty_comment(self):
        assert patterns.EMPTY_COMMENT.matches("#")
        assert patterns.EMPTY_COMMENT.matches("#      ")
        assert not patterns.EMPTY_COMMENT.matches("# test")

    def test_empty_comment_has_no_payload(self):
        assert patterns.EMPTY_COMMENT.payload("#") is None

    def test_instruction(self):
        assert patterns.INSTRUCTION.matches('#   (use "git add <file>..." to include in what will be committed)')
        assert not patterns.INSTRUCTION.matches("# fileA")

    def test_headers(self):
        assert patterns.STAGED_HEADER.matches("# Changes to be committed:")
        assert patterns.UNSTAGED_HEADER.matches("# Changed but not updated:")
        assert patterns.UNSTAGED_HEADER.matches("# Changes not staged for commit:")
        assert patterns.UNTRACKED_HEADER.matches("# Untracked files:")
        assert not patterns.UNTRACKED_HEADER.matches("# modified:   Untracked files:")

    def test_on_branch(self):
        assert patterns.ON_BRANCH.payload("# On branch master") == "master"
        assert patterns.ON_BRANCH.payload("# On branch feature/x ") == "feature/x"

    def test_is_comment(self):
        assert patterns.is_comment("# anything")
        assert not patterns.is_comment("nothing to commit")


class TestCommitHelpers:
    def test_file_stats_full(self):
        assert patterns.file_stats(" 2 files changed, 3 insertions(+), 1 deletions(-)") == (2, 3, 1)

    def test_file_stats_missing_clauses(self):
        assert patterns.file_stats(" 1 file changed, 1 insertion(+)") == (1, 1, 0)
        assert patterns.file_stats(" 4 files changed, 9 deletions(-)") == (4, 0, 9)

    def test_stats_line_without_files_clause(self):
        assert patterns.FILE_STATS.matches(" 3 insertions(+)")
        assert patterns.FILE_STATS.matches(" 1 deletion(-)")
        assert patterns.FILE_STATS.matches(" 1 file changed, 1 insertion(+)")
        assert not patterns.FILE_STATS.matches(" create mode 100644 3 insertions(+)")
        assert patterns.file_stats(" 3 insertions(+)") == (0, 3, 0)

    def test_unquote(self):
        assert patterns.unquote('"foo02"') == "foo02"
        assert patterns.unquote("'foo02'") == "foo02"
        assert patterns.unquote("foo02") == "foo02"
        assert patterns.unquote("'foo02\"") == "'foo02\""
