"""
Tests for the arena-backed node store.

Focus Areas:
1. Root, folder and file accessors
2. add(): parent links, depth and shallow size accounting
3. remove(): detaching, dropping subtrees, no size adjustment
4. resolve(): root, parent, named segments and failure cases
5. Structural invariants over a built tree
"""

import pytest

from treeshell.core.paths import DirSegment, FileSegment, ParentSegment, RootSegment
from treeshell.core.tree import NodeKind, NodeStore
from treeshell.exceptions import NodeNotFoundError, NodeTypeError


@pytest.fixture
def store():
    return NodeStore()


@pytest.fixture
def tree(store):
    """root/home/{docs/{a.txt(5), b.txt(3)}, pics/}"""
    home = store.new_folder("home")
    store.add(store.root, home)
    docs = store.new_folder("docs")
    store.add(home, docs)
    store.add(docs, store.new_file("a.txt", 5))
    store.add(docs, store.new_file("b.txt", 3))
    pics = store.new_folder("pics")
    store.add(home, pics)
    return store, home, docs, pics


class TestAccessors:
    """Kind-specific fields are None where they do not apply."""

    def test_root(self, store):
        root = store.root
        assert root.is_root
        assert store.name(root) is None
        assert store.size(root) is None
        assert store.parent(root) is None
        assert store.depth(root) == 0
        assert store.children(root) == []

    def test_new_folder(self, store):
        folder = store.new_folder("docs")
        assert folder.kind is NodeKind.FOLDER
        assert store.name(folder) == "docs"
        assert store.size(folder) == 0
        assert store.children(folder) == []

    def test_new_file(self, store):
        file = store.new_file("a.txt", 7)
        assert file.is_file
        assert store.size(file) == 7
        assert store.children(file) is None

    def test_new_nodes_are_detached(self, store):
        folder = store.new_folder("docs")
        assert folder not in store
        assert len(store) == 1


class TestAdd:
    """Attaching children."""

    def test_links_parent_and_child(self, store):
        folder = store.new_folder("docs")
        store.add(store.root, folder)
        assert folder in store
        assert store.parent(folder) is store.root
        assert store.children(store.root) == [folder]

    def test_depth_is_parent_depth_plus_one(self, tree):
        store, home, docs, pics = tree
        assert home.depth == 1
        assert docs.depth == 2
        a_txt = store.find_child(docs, "a.txt")
        assert a_txt.depth == 3

    def test_folder_size_is_sum_of_children(self, tree):
        store, home, docs, pics = tree
        assert store.size(docs) == 8

    def test_size_is_not_propagated_to_grandparents(self, tree):
        store, home, docs, pics = tree
        # docs was empty when it was added to home
        assert store.size(home) == 0

    def test_root_does_not_track_size(self, store):
        store.add(store.root, store.new_file("a.txt", 4))
        assert store.size(store.root) is None

    def test_children_keep_insertion_order(self, tree):
        store, home, docs, pics = tree
        assert [child.name for child in store.children(docs)] == ["a.txt", "b.txt"]

    def test_file_cannot_have_children(self, store):
        file = store.new_file("a.txt", 1)
        store.add(store.root, file)
        with pytest.raises(NodeTypeError) as exc_info:
            store.add(file, store.new_file("b.txt", 1))
        assert exc_info.value.name == "a.txt"

    def test_duplicate_names_are_allowed(self, store):
        first = store.new_folder("x")
        second = store.new_folder("x")
        store.add(store.root, first)
        store.add(store.root, second)
        assert store.find_child(store.root, "x") is first
        assert len(store.children(store.root)) == 2


class TestRemove:
    """Detaching and dropping children."""

    def test_removes_named_child(self, tree):
        store, home, docs, pics = tree
        removed = store.remove(docs, "a.txt")
        assert removed.name == "a.txt"
        assert removed not in store
        assert [child.name for child in store.children(docs)] == ["b.txt"]

    def test_drops_whole_subtree(self, tree):
        store, home, docs, pics = tree
        before = len(store)
        store.remove(home, "docs")
        assert len(store) == before - 3
        assert docs not in store

    def test_sizes_are_not_adjusted(self, tree):
        store, home, docs, pics = tree
        store.remove(docs, "a.txt")
        assert store.size(docs) == 8

    def test_missing_name(self, tree):
        store, home, docs, pics = tree
        with pytest.raises(NodeNotFoundError) as exc_info:
            store.remove(docs, "c.txt")
        assert exc_info.value.name == "c.txt"

    def test_first_match_is_removed(self, store):
        first = store.new_folder("x")
        second = store.new_folder("x")
        store.add(store.root, first)
        store.add(store.root, second)
        assert store.remove(store.root, "x") is first
        assert store.children(store.root) == [second]

    def test_kind_filter_skips_other_kinds(self, store):
        folder = store.new_folder("a.txt")
        file = store.new_file("a.txt", 1)
        store.add(store.root, folder)
        store.add(store.root, file)
        assert store.remove(store.root, "a.txt", NodeKind.FILE) is file
        assert store.children(store.root) == [folder]

    def test_kind_filter_reports_missing(self, store):
        store.add(store.root, store.new_folder("x"))
        with pytest.raises(NodeNotFoundError):
            store.remove(store.root, "x", NodeKind.FILE)

    def test_removing_from_a_file(self, store):
        file = store.new_file("a.txt", 1)
        store.add(store.root, file)
        with pytest.raises(NodeNotFoundError):
            store.remove(file, "anything")


class TestResolve:
    """Path resolution from a starting node."""

    def test_empty_path_is_start(self, tree):
        store, home, docs, pics = tree
        assert store.resolve(docs, ()) is docs

    def test_relative_dir(self, tree):
        store, home, docs, pics = tree
        assert store.resolve(home, (DirSegment("docs"),)) is docs

    def test_file_segment(self, tree):
        store, home, docs, pics = tree
        node = store.resolve(home, (DirSegment("docs"), FileSegment("b.txt")))
        assert node.name == "b.txt"

    def test_root_segment(self, tree):
        store, home, docs, pics = tree
        path = (RootSegment(), DirSegment("home"), DirSegment("pics"))
        assert store.resolve(docs, path) is pics

    def test_parent_segment(self, tree):
        store, home, docs, pics = tree
        assert store.resolve(docs, (ParentSegment(), DirSegment("pics"))) is pics

    def test_parent_up_to_root(self, tree):
        store, home, docs, pics = tree
        assert store.resolve(docs, (ParentSegment(), ParentSegment())) is store.root

    def test_parent_of_root_fails(self, store):
        with pytest.raises(NodeNotFoundError):
            store.resolve(store.root, (ParentSegment(),))

    def test_missing_dir(self, tree):
        store, home, docs, pics = tree
        with pytest.raises(NodeNotFoundError) as exc_info:
            store.resolve(home, (DirSegment("music"), DirSegment("docs")))
        assert exc_info.value.name == "music"

    def test_cannot_descend_into_file(self, tree):
        store, home, docs, pics = tree
        with pytest.raises(NodeNotFoundError):
            store.resolve(docs, (DirSegment("a.txt"), DirSegment("x")))

    def test_resolution_is_pure(self, tree):
        store, home, docs, pics = tree
        path = (ParentSegment(), DirSegment("docs"))
        assert store.resolve(pics, path) is store.resolve(pics, path)


class TestPathsAndWalk:
    """Absolute paths and subtree iteration."""

    def test_path_of_root(self, store):
        assert store.path_of(store.root) == "/"

    def test_path_of_nested_node(self, tree):
        store, home, docs, pics = tree
        assert store.path_of(store.find_child(docs, "a.txt")) == "/home/docs/a.txt"

    def test_walk_is_depth_first(self, tree):
        store, home, docs, pics = tree
        names = [node.name for node in store.walk(home)]
        assert names == ["home", "docs", "a.txt", "b.txt", "pics"]

    def test_deep_chain_is_walked_and_removed(self, store):
        parent = store.root
        for index in range(3000):
            folder = store.new_folder(f"d{index}")
            store.add(parent, folder)
            parent = folder
        assert len(list(store.walk(store.root))) == 3001
        store.remove(store.root, "d0")
        assert len(store) == 1

    def test_get_by_id(self, tree):
        store, home, docs, pics = tree
        assert store.get(docs.node_id) is docs

    def test_get_unknown_id(self, store):
        with pytest.raises(NodeNotFoundError):
            store.get(12345)


class TestInvariants:
    """Parent/child linkage and depth hold for every node."""

    def test_every_node_is_linked_once(self, tree):
        store, home, docs, pics = tree
        store.remove(docs, "a.txt")
        for node in store.walk(store.root):
            if node.is_root:
                assert node.depth == 0
                continue
            parent = store.parent(node)
            assert parent.children.count(node.node_id) == 1
            assert node.depth == parent.depth + 1

    def test_walk_reaches_every_stored_node(self, tree):
        store, home, docs, pics = tree
        assert len(list(store.walk(store.root))) == len(store)
