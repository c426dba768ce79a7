"""Labels, place names, generator parameters and demo defaults."""

from __future__ import annotations

DEFAULT_BASE = 10
MIN_BASE = 2

PLACE_NAMES: tuple[str, ...] = (
    "ones",
    "tens",
    "hundreds",
    "thousands",
    "ten-thousands",
    "hundred-thousands",
)
GENERIC_PLACE_TEMPLATE = "10^{position}"

ALGORITHM_LSD = "lsd"
ALGORITHM_MSD = "msd"

LSD_PASS_LABEL = "Pass {number}: {place} place"
LSD_COMPLETE_LABEL = "Sorted (LSD complete)"
MSD_ROOT_BASE_LABEL = "Base case"
MSD_BASE_LABEL = "Depth {depth}: base case"
MSD_SPLIT_LABEL = "Depth {depth}: split on {place}"
MSD_MERGE_LABEL = "Depth {depth}: merge buckets"
MSD_COMPLETE_LABEL = "Sorted (MSD complete)"

# Park-Miller minimal standard generator
LCG_MODULUS = 2147483647
LCG_MULTIPLIER = 16807

DATASET_MIN_SIZE = 2
DATASET_MAX_SIZE = 100
DATASET_MIN_DIGITS = 1
DATASET_MAX_DIGITS = 8
DEFAULT_DATASET_SIZE = 12
DEFAULT_DATASET_DIGITS = 4

DEFAULT_INTERVAL_MS = 1200

DIGIT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

EMPTY_TRACE_TEXT = "No recorded steps."
EMPTY_ARRAY_TEXT = "No data."
EMPTY_BUCKET_TEXT = "--"
BASE_CASE_TEXT = "Base case: bucket split not required."
COMPLETE_TEXT = "All items have been merged."
NO_BUCKETS_TEXT = "No bucket data for this step."
