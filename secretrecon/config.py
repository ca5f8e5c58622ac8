"""Global configuration for secretrecon."""

import os

# ---------- Fixed-modulus prime (2^128 + 51, smallest prime above 2^128) ----------
# Must exceed any share value the fixed strategy is expected to see.
FIXED_PRIME = int(os.environ.get("SECRETRECON_PRIME", str(2**128 + 51)))

# ---------- Strategy selection ----------
STRATEGIES = ("fixed", "dynamic", "rational")
DEFAULT_STRATEGY = os.environ.get("SECRETRECON_STRATEGY", "fixed")

# ---------- Dynamic-modulus search ----------
# p = smallest probable prime > max(share values) + margin
DYNAMIC_PRIME_MARGIN = int(os.environ.get("SECRETRECON_PRIME_MARGIN", "1000"))
MILLER_RABIN_ROUNDS = int(os.environ.get("SECRETRECON_MR_ROUNDS", "40"))

# ---------- Batch input fetching ----------
FETCH_TIMEOUT = float(os.environ.get("SECRETRECON_FETCH_TIMEOUT", "10.0"))

# ---------- Logging ----------
LOG_LEVEL = os.environ.get("SECRETRECON_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
