"""
Tests for the tree-independent proof helpers.
"""

import unittest

from merkle_tree import MerkleTree
from merkle_tree.hashing import Hasher, hash_leaf
from merkle_tree.proof import (
    compute_root_from_proof,
    get_proof_indices,
    validate_proof_length,
    verify_merkle_proof,
)

ELEMENTS = ["hola", "moikka", "heippa", "ahoj", "privet", "bonjour", "konichiwa", "rytsas"]


class TestProofHelpers(unittest.TestCase):

    def setUp(self):
        self.tree = MerkleTree(ELEMENTS)

    def test_compute_root_from_proof(self):
        for i in range(len(ELEMENTS)):
            with self.subTest(i=i):
                leaf = hash_leaf(ELEMENTS[i])
                self.assertEqual(
                    compute_root_from_proof(leaf, i, self.tree.proof(i)), self.tree.root
                )

    def test_verify_without_tree(self):
        proof = self.tree.proof(6)
        root = self.tree.root
        self.assertTrue(verify_merkle_proof(hash_leaf("konichiwa"), proof, 6, root))
        self.assertFalse(verify_merkle_proof(hash_leaf("rytsas"), proof, 6, root))
        self.assertFalse(verify_merkle_proof(hash_leaf("konichiwa"), proof, 6, b"\x00" * 32))

    def test_verify_with_matching_hasher(self):
        hasher = Hasher("blake2b")
        tree = MerkleTree(ELEMENTS, hasher=hasher)
        leaf = hasher.hash_leaf("privet")
        self.assertTrue(verify_merkle_proof(leaf, tree.proof(4), 4, tree.root, hasher))
        self.assertFalse(verify_merkle_proof(leaf, tree.proof(4), 4, tree.root))

    def test_get_proof_indices(self):
        self.assertEqual(get_proof_indices(3, 3), [2, 0, 1])
        self.assertEqual(get_proof_indices(0, 2), [1, 1])
        self.assertEqual(get_proof_indices(0, 0), [])

    def test_proof_indices_point_at_proof_siblings(self):
        levels = self.tree.levels()
        proof = self.tree.proof(5)
        for step, sibling_index in enumerate(get_proof_indices(5, self.tree.depth)):
            level = levels[len(levels) - 1 - step]
            self.assertEqual(level[sibling_index], proof[step])

    def test_proof_indices_match_index_walk(self):
        for index in range(8):
            expected = []
            current = index
            for _ in range(3):
                expected.append(current ^ 1)
                current //= 2
            self.assertEqual(get_proof_indices(index, 3), expected)

    def test_validate_proof_length(self):
        self.assertTrue(validate_proof_length(self.tree.proof(0), 3))
        self.assertFalse(validate_proof_length(self.tree.proof(0), 4))


if __name__ == "__main__":
    unittest.main()
