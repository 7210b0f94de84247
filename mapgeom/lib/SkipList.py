# Implementation of the class <SkipList>, an ordered set of keys with
# associated data. It is used as the sweep-line structure of the
# self-intersection check, where the neighbors of a key must be found in
# O(log n) expected time.
#
# The node layout with <succ> and <prev> pointer lists per level follows
# py-skiplist by Alexander Zhukov, at https://github.com/ZhukovAlexander/py-skiplist
# He published the code under the "Do What The F*ck You Want To Public License".

import random

from .. import defs


class SkipNode():
    __slots__ = ("key", "data", "succ", "prev")

    def __init__(self, key, data, height):
        self.key = key
        self.data = data
        self.succ = [None]*height
        self.prev = [None]*height


class SkipList():
    """
    Keys must be totally ordered by the operators < and ==. A key is stored
    only once, inserting an equal key again returns the existing node.
    """
    def __init__(self, maxHeight=None, probability=None, rng=None):
        self.maxHeight = maxHeight or defs.skipListMaxHeight
        self.probability = probability or defs.skipListProbability
        self.random = rng or random.Random()

        self._head = SkipNode(None, 'HEAD', self.maxHeight)
        self._tail = SkipNode(None, 'TAIL', self.maxHeight)
        for level in range(self.maxHeight):
            self._head.succ[level] = self._tail
            self._tail.prev[level] = self._head
        # the number of levels in use
        self._height = 1
        self._size = 0

    @property
    def head(self):
        return self._head

    @property
    def tail(self):
        return self._tail

    def _randomHeight(self):
        height = 1
        while height < self.maxHeight and self.random.random() < self.probability:
            height += 1
        return height

    def _scan(self, key):
        # Returns the node with the key <key> (None if there is no such node)
        # and, for each level, the last node with a key less than <key>.
        update = [self._head]*self.maxHeight
        tail = self._tail
        node = self._head
        for level in reversed(range(self._height)):
            succ = node.succ[level]
            while succ is not tail and succ.key < key:
                node = succ
                succ = node.succ[level]
            update[level] = node
        succ = node.succ[0]
        found = succ if succ is not tail and succ.key == key else None
        return found, update

    def insert(self, key, data=None):
        """
        Inserts <key> with <data> and returns the new node. If <key> is
        already in the list, the existing node is returned unchanged.
        """
        node, update = self._scan(key)
        if node is not None:
            return node

        height = self._randomHeight()
        self._height = max(self._height, height)
        node = SkipNode(key, data, height)
        for level in range(height):
            prev = update[level]
            succ = prev.succ[level]
            node.prev[level] = prev
            node.succ[level] = succ
            prev.succ[level] = succ.prev[level] = node
        self._size += 1
        return node

    def lookup(self, key):
        """
        Returns the node with the key <key>, None if there is no such node.
        """
        return self._scan(key)[0]

    def delete(self, key):
        """
        Removes the node with the key <key> and returns it.
        No operation if no such key exists.
        """
        node = self.lookup(key)
        if node is not None:
            self.delItem(node)
        return node

    def delItem(self, node):
        for level in range(len(node.succ)):
            node.prev[level].succ[level] = node.succ[level]
            node.succ[level].prev[level] = node.prev[level]
        # trim unused levels
        while self._height > 1 and self._head.succ[self._height-1] is self._tail:
            self._height -= 1
        self._size -= 1

    def pred(self, node):
        node = node.prev[0]
        return None if node is self._head else node

    def succ(self, node):
        node = node.succ[0]
        return None if node is self._tail else node

    def neighbors(self, key):
        """
        Returns the nodes with the greatest key less than <key> and with the
        smallest key greater than <key>, None where there is no such node.
        <key> itself doesn't need to be in the list.
        """
        node, update = self._scan(key)
        lower = update[0]
        higher = node.succ[0] if node is not None else lower.succ[0]
        return (
            None if lower is self._head else lower,
            None if higher is self._tail else higher
        )

    def min(self):
        return self.succ(self._head)

    def empty(self):
        return self._size == 0

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self.lookup(key) is not None

    def _level(self):
        node = self._head.succ[0]
        while node is not self._tail:
            yield node
            node = node.succ[0]

    def __iter__(self):
        # iterate over keys in sorted order
        return (node.key for node in self._level())

    def items(self):
        return ((node.key, node.data) for node in self._level())

    def __repr__(self):
        return 'skiplist({{{}}})'.format(
            ', '.join('{key}: {value}'.format(key=key, value=data) for key, data in self.items())
        )
