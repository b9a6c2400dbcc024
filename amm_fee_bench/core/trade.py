"""Trade data classes."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from amm_fee_bench.core.errors import InvalidPolicyError


class TradeSide(Enum):
    """Direction of a trade from the trader's perspective."""
    X_FOR_Y = "x_for_y"  # Trader pays X, receives Y (positive amount)
    Y_FOR_X = "y_for_x"  # Trader pays Y, receives X (negative amount)

    @classmethod
    def of(cls, amount: float) -> "TradeSide":
        """Side implied by the sign of a signed trade amount."""
        return cls.X_FOR_Y if amount > 0 else cls.Y_FOR_X


class FeePolicy(Enum):
    """How a pool accounts for the fees it charges."""
    ORIGINAL = "original"              # Fee re-injected into the input reserve
    SEPARATE = "separate"              # Fee on input, held outside the pool
    LATER_SEPARATE = "later_separate"  # Fee on output, held outside the pool

    @property
    def label(self) -> str:
        """Human readable name used in summaries."""
        return self.value.replace("_", " ")

    @classmethod
    def parse(cls, tag: Union["FeePolicy", str, int]) -> "FeePolicy":
        """Resolve a policy from a member, its string value or its integer tag.

        Integer tags follow the declaration order (0 = original,
        1 = separate, 2 = later separate).

        Raises:
            InvalidPolicyError: If the tag names no known policy
        """
        if isinstance(tag, cls):
            return tag
        # bool is an int subclass; True/False are never meaningful tags
        if isinstance(tag, int) and not isinstance(tag, bool):
            members = list(cls)
            if 0 <= tag < len(members):
                return members[tag]
        elif isinstance(tag, str):
            normalized = tag.strip().lower().replace("-", "_").replace(" ", "_")
            for member in cls:
                if member.value == normalized:
                    return member
        raise InvalidPolicyError(f"Unknown fee policy: {tag!r}")


@dataclass(frozen=True)
class SwapResult:
    """Outcome of one swap, oriented by input and output side.

    The pool maps these back onto X and Y depending on the trade side.
    """
    reserve_in: float   # Post-trade reserve of the asset paid in
    reserve_out: float  # Post-trade reserve of the asset paid out
    fee_in: float       # Fee credited to the input side's bucket
    fee_out: float      # Fee credited to the output side's bucket
