from treeset.base.slot import Node, Slot

from invariants import bst_violations

class TestSlot:
    def test_empty_slot(self):
        slot = Slot()

        assert slot.empty
        assert slot.count() == 0
        assert slot.depth() == 0
        assert slot.has(1) is False
        assert slot.find(1) is None
        assert list(slot.walk()) == []

    def test_insert_occupies_exactly_one_slot(self):
        slot = Slot()

        assert slot.insert("b", "b") is True
        assert not slot.empty
        assert isinstance(slot.node, Node)
        assert slot.node.left.empty and slot.node.right.empty

        assert slot.insert("a", "a") is True
        assert slot.node.left.node.value == "a"
        assert slot.node.right.empty

        assert slot.insert("c", "c") is True
        assert slot.node.right.node.value == "c"

        assert slot.count() == 3

    def test_duplicate_is_a_no_op(self):
        slot = Slot()
        slot.insert(1, 1)
        root = slot.node

        assert slot.insert(1, 1) is False
        assert slot.node is root
        assert root.left.empty and root.right.empty
        assert slot.count() == 1

    def test_value_and_key_are_separate(self):
        slot = Slot()
        slot.insert("long", 4)
        slot.insert("s", 1)

        assert slot.has(4)
        assert slot.find(1).value == "s"
        assert [n.value for n in slot.walk()] == ["s", "long"]

    def test_walk(self):
        slot = Slot()
        for v in (4, 2, 6, 1, 3, 5, 7):
            slot.insert(v, v)

        assert [n.key for n in slot.walk()] == [1, 2, 3, 4, 5, 6, 7]
        assert [n.key for n in slot.walk(reverse=True)] == [7, 6, 5, 4, 3, 2, 1]
        assert slot.depth() == 3
        assert bst_violations(slot) == []

    def test_walk_range_prunes_subtrees(self):
        slot = Slot()
        for v in (4, 2, 6, 1, 3, 5, 7):
            slot.insert(v, v)

        assert [n.key for n in slot.walk_range(3, 5)] == [3, 4, 5]
        assert [n.key for n in slot.walk_range(3, 5, reverse=True)] == [5, 4, 3]
        assert [n.key for n in slot.walk_range(3, 5, (False, False))] == [4]
        assert [n.key for n in slot.walk_range(high=2)] == [1, 2]
        assert [n.key for n in slot.walk_range(low=6)] == [6, 7]

    def test_violations_are_detected(self):
        slot = Slot()
        for v in (4, 2, 6):
            slot.insert(v, v)

        # Break the ordering by hand
        slot.node.left.node.key = 9

        assert [n.key for n in bst_violations(slot)] == [9]
