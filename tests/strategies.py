"""Hypothesis strategies for property-based testing of elevated types."""

from elevated import Nothing, Some
from hypothesis import strategies as st

# -----------------------------------------------------------------------------
# Basic value strategies
# -----------------------------------------------------------------------------

integers = st.integers()
texts = st.text(min_size=0, max_size=100)

# -----------------------------------------------------------------------------
# Option strategies
# -----------------------------------------------------------------------------

somes = integers.map(Some)
nothings = st.just(Nothing)
options = st.one_of(nothings, somes)

# Pure integer functions for the functor laws
int_functions = st.sampled_from([
    lambda x: x + 1,
    lambda x: x * 2,
    lambda x: -x,
    lambda x: x // 3,
    abs,
])

# World-crossing functions for the monad laws
option_functions = st.sampled_from([
    lambda x: Some(x + 1),
    lambda x: Some(x * 3),
    lambda x: Nothing if x == 0 else Some(x),
    lambda x: Nothing if x % 2 else Some(x // 2),
    lambda _: Nothing,
])
