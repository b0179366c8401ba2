"""
Tests for the session context.
"""

from treeshell.core.context import DEFAULT_USER, Context
from treeshell.core.paths import DirSegment, ParentSegment


class TestCreate:
    """The initial /home/<user> skeleton."""

    def test_starts_in_user_home(self, context):
        assert context.current_path() == f"/home/{DEFAULT_USER}"
        assert context.current_dir.depth == 2

    def test_root_holds_only_home(self, context):
        children = context.store.children(context.root)
        assert [child.name for child in children] == ["home"]

    def test_custom_user(self):
        context = Context.create("alice", display=lambda line: None)
        assert context.current_path() == "/home/alice"

    def test_empty_context_starts_at_root(self):
        context = Context()
        assert context.current_dir is context.root
        assert context.current_path() == "/"


class TestResolveAndChangeDir:
    """Relative resolution follows the current directory."""

    def test_resolve_is_relative_to_current_dir(self, context):
        home = context.resolve((ParentSegment(),))
        assert home.name == "home"

    def test_change_dir_replaces_current_dir(self, context):
        home = context.resolve((ParentSegment(),))
        context.change_dir(home)
        assert context.current_dir is home
        assert context.resolve((DirSegment(DEFAULT_USER),)).name == DEFAULT_USER


class TestDisplay:
    """User-facing output goes to the display sink."""

    def test_echo_uses_display(self, context, output):
        context.echo("hello")
        assert output == ["hello"]

    def test_default_display_prints(self, capsys):
        Context().echo("hello")
        assert capsys.readouterr().out == "hello\n"
