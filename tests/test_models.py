"""
Tests for the pydantic proof and tree models.
"""

import unittest

from pydantic import ValidationError

from merkle_tree import MerkleTree
from merkle_tree.hashing import Hasher
from merkle_tree.models import ProofModel, TreeSummary

ELEMENTS = ["hola", "moikka", "heippa", "ahoj"]


class TestProofModel(unittest.TestCase):

    def setUp(self):
        self.tree = MerkleTree(ELEMENTS)

    def test_from_tree(self):
        model = ProofModel.from_tree(self.tree, 2)
        self.assertEqual(model.leaf_index, 2)
        self.assertEqual(model.root, "0x" + self.tree.root.hex())
        self.assertEqual(len(model.proof), 2)
        self.assertEqual(model.algorithm, "sha3_256")

    def test_to_bytes_and_verify(self):
        model = ProofModel.from_tree(self.tree, 1)
        leaf, proof, root = model.to_bytes()
        self.assertEqual(leaf, self.tree.leaf(1))
        self.assertEqual(proof, self.tree.proof(1))
        self.assertEqual(root, self.tree.root)
        self.assertTrue(model.verify())

    def test_verify_detects_wrong_index(self):
        data = ProofModel.from_tree(self.tree, 1).model_dump()
        data["leaf_index"] = 0
        self.assertFalse(ProofModel(**data).verify())

    def test_verify_uses_model_algorithm(self):
        tree = MerkleTree(ELEMENTS, hasher=Hasher("sha256"))
        model = ProofModel.from_tree(tree, 3)
        self.assertEqual(model.algorithm, "sha256")
        self.assertTrue(model.verify())

    def test_invalid_hex_rejected(self):
        data = ProofModel.from_tree(self.tree, 0).model_dump()
        for field, value in (("root", "0x12G4"), ("leaf", ""), ("proof", ["0x123"])):
            with self.subTest(field=field):
                with self.assertRaises(ValidationError):
                    ProofModel(**{**data, field: value})

    def test_negative_index_rejected(self):
        data = ProofModel.from_tree(self.tree, 0).model_dump()
        with self.assertRaises(ValidationError):
            ProofModel(**{**data, "leaf_index": -1})

    def test_unknown_algorithm_rejected(self):
        data = ProofModel.from_tree(self.tree, 0).model_dump()
        with self.assertRaises(ValidationError):
            ProofModel(**{**data, "algorithm": "md17"})


class TestTreeSummary(unittest.TestCase):

    def test_from_tree(self):
        tree = MerkleTree(ELEMENTS)
        summary = TreeSummary.from_tree(tree)
        self.assertEqual(summary.count, 4)
        self.assertEqual(summary.depth, 2)
        self.assertEqual(len(summary.nodes), 7)
        self.assertEqual(summary.nodes[0], summary.root)


if __name__ == "__main__":
    unittest.main()
