"""
Merkle Tree Constants
"""

# hashlib name of the default digest function
DEFAULT_HASH_ALGORITHM = "sha3_256"

# Encoding applied to str elements before hashing
ELEMENT_ENCODING = "utf-8"

DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Elements used by the demo entry point
DEMO_ELEMENTS = ["Cat", "Dog", "Spider", "Snake"]
