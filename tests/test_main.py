"""
Tests for the entry point and configuration.
"""

import contextlib
import io
import logging
import os
import unittest
from unittest import mock

from merkle_tree import InvalidInputError, MerkleTree
from merkle_tree.config import Settings, get_settings
from merkle_tree.constants import DEMO_ELEMENTS
from merkle_tree.main import build_tree, main


class TestBuildTree(unittest.TestCase):

    def test_build_tree(self):
        result = build_tree(["hola", "moikka"], "sha3_256")
        self.assertEqual(
            result.root.hex(),
            "d703ed960de71d89e617a637f87813b9da95461f30d5d5030329b979ff931032",
        )
        self.assertEqual(result.metadata["leaf_count"], 2)
        self.assertEqual(result.metadata["node_count"], 3)
        self.assertEqual(result.metadata["algorithm"], "sha3_256")

    def test_build_tree_with_additions(self):
        result = build_tree(["hola", "moikka"], "sha3_256", ["heippa", "ahoj"])
        self.assertEqual(
            result.root.hex(),
            "8321751cd2de3135bcc3ee9ad978061b284d1ec23f83279192ebcc3666c9e5cc",
        )
        self.assertEqual(result.metadata["depth"], 2)

    def test_algorithm_from_environment(self):
        with mock.patch.dict(os.environ, {"MERKLE_HASH_ALGORITHM": "sha256"}):
            result = build_tree(["hola", "moikka"])
        self.assertEqual(result.metadata["algorithm"], "sha256")

    def test_main_prints_all_hashes(self):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            hashes = main(algorithm="sha3_256")
        self.assertEqual(hashes, [h.hex() for h in MerkleTree(DEMO_ELEMENTS).all_nodes()])
        self.assertEqual(len(stdout.getvalue().splitlines()), 7)
        self.assertIn(hashes[0], stdout.getvalue())


    def test_main_with_empty_list_fails(self):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            with self.assertRaises(InvalidInputError):
                main([], "sha3_256")
        self.assertEqual(stdout.getvalue(), "")


class TestSettings(unittest.TestCase):

    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = get_settings()
        self.assertEqual(settings, Settings())
        self.assertEqual(settings.hash_algorithm, "sha3_256")
        self.assertEqual(settings.log_level_value, logging.INFO)

    def test_environment_overrides(self):
        env = {"MERKLE_HASH_ALGORITHM": "sha512", "MERKLE_LOG_LEVEL": "debug"}
        with mock.patch.dict(os.environ, env):
            settings = get_settings()
        self.assertEqual(settings.hash_algorithm, "sha512")
        self.assertEqual(settings.log_level_value, logging.DEBUG)

    def test_unknown_log_level_falls_back_to_info(self):
        self.assertEqual(Settings(log_level="chatty").log_level_value, logging.INFO)


if __name__ == "__main__":
    unittest.main()
