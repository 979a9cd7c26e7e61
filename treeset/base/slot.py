class Node:
    """
    One stored value, its ordering key and the two child slots it owns.
    """

    def __init__(self, value, key):
        self.value = value
        self.key = key
        self.left = Slot()
        self.right = Slot()

    def __repr__(self):
        return f"Node({self.value!r})"


class Slot:
    """
    A tree position: either empty (``node is None``) or holding exactly one node.

    Every walk below is an explicit loop so that a degenerate chain
    (values inserted in sorted order) never hits the recursion limit.
    """

    def __init__(self):
        self.node = None

    @property
    def empty(self):
        return self.node is None

    def insert(self, value, key):
        """
        Store ``value`` in the first empty slot on the search path of ``key``.

        Returns True when a node was created, False when ``key`` was already present.
        """
        slot = self
        while slot.node is not None:
            node = slot.node
            if key < node.key:
                slot = node.left
            elif key > node.key:
                slot = node.right
            else:
                return False

        slot.node = Node(value, key)
        return True

    def find(self, key):
        """
        Return the node holding ``key``, or ``None``.
        """
        node = self.node
        while node is not None:
            if key < node.key:
                node = node.left.node
            elif key > node.key:
                node = node.right.node
            else:
                return node
        return None

    def has(self, key):
        return self.find(key) is not None

    def count(self):
        total = 0
        pending = [self]
        while pending:
            node = pending.pop().node
            if node is None:
                continue
            total += 1
            pending.append(node.left)
            pending.append(node.right)
        return total

    def depth(self):
        deepest = 0
        pending = [(self, 1)]
        while pending:
            slot, level = pending.pop()
            if slot.node is None:
                continue
            deepest = max(deepest, level)
            pending.append((slot.node.left, level + 1))
            pending.append((slot.node.right, level + 1))
        return deepest

    def walk(self, reverse=False):
        """
        Yield nodes in ascending key order (descending with ``reverse``).
        """
        stack = []
        node = self.node
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.right.node if reverse else node.left.node
                continue

            node = stack.pop()
            yield node
            node = node.left.node if reverse else node.right.node

    def walk_range(self, low=None, high=None, inclusive=(True, True), reverse=False):
        """
        Yield nodes whose key lies between ``low`` and ``high`` in key order.

        ``None`` leaves that side unbounded. Subtrees entirely outside the
        bounds are never visited.
        """
        include_low, include_high = inclusive

        def above_low(key):
            if low is None:
                return True
            return not key < low if include_low else key > low

        def below_high(key):
            if high is None:
                return True
            return not key > high if include_high else key < high

        stack = []
        node = self.node
        while stack or node is not None:
            if node is not None:
                if reverse:
                    if below_high(node.key):
                        stack.append(node)
                        node = node.right.node
                    else:
                        node = node.left.node
                else:
                    if above_low(node.key):
                        stack.append(node)
                        node = node.left.node
                    else:
                        node = node.right.node
                continue

            node = stack.pop()
            if reverse:
                if not above_low(node.key):
                    return
                if below_high(node.key):
                    yield node
                node = node.left.node
            else:
                if not below_high(node.key):
                    return
                if above_low(node.key):
                    yield node
                node = node.right.node
