from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral


SUBSHELL_LABELS = {0: "s", 1: "p", 2: "d", 3: "f"}

# (n, l) pairs with a closed-form evaluator, in generation order.
SUPPORTED_SUBSHELLS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (2, 0),
    (3, 0),
    (2, 1),
    (3, 1),
    (3, 2),
)


class OrbitalError(Exception):
    """Base class for failures resolving an orbital."""


class InvalidQuantumNumbers(OrbitalError, ValueError):
    pass


class UnsupportedOrbital(OrbitalError, LookupError):
    def __init__(self, state: QuantumState) -> None:
        self.state = state
        super().__init__(
            f"support for (n={state.n}, l={state.l}, m={state.m})-orbital not yet implemented"
        )


def validate_quantum_numbers(n: int, l: int, m: int) -> None:
    if not n >= 1:
        raise InvalidQuantumNumbers(f"invalid n; expected n >= 1, got {n}")
    if not 0 <= l < n:
        raise InvalidQuantumNumbers(f"invalid l; expected 0 <= l < n, got l={l} for n={n}")
    if not -l <= m <= l:
        raise InvalidQuantumNumbers(f"invalid m; expected -l <= m <= +l, got m={m} for l={l}")


@dataclass(frozen=True)
class QuantumState:
    n: int
    l: int
    m: int

    def __post_init__(self) -> None:
        for name in ("n", "l", "m"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidQuantumNumbers(f"{name} must be an integer, got {value!r}")
            object.__setattr__(self, name, int(value))
        validate_quantum_numbers(self.n, self.l, self.m)

    @property
    def label(self) -> str:
        return f"{self.n}{SUBSHELL_LABELS.get(self.l, '?')}"

    @property
    def orbital_name(self) -> str:
        return f"orbital_n_{self.n}_l_{self.l}_m_{self.m}"

    def __str__(self) -> str:
        return f"{self.label}(m={self.m})"


def supported_states() -> list[QuantumState]:
    """Every state with an implemented closed form: 1s, 2s, 3s, 2p, 3p and 3d."""
    states: list[QuantumState] = []
    for n, l in SUPPORTED_SUBSHELLS:
        for m in range(-l, l + 1):
            states.append(QuantumState(n, l, m))
    return states


def parse_state(text: str) -> QuantumState:
    """Parse ``"n,l,m"`` (e.g. ``"3,2,-1"``) into a validated state."""
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 3:
        raise InvalidQuantumNumbers(f"expected 'n,l,m', got {text!r}")
    try:
        n, l, m = (int(part) for part in parts)
    except ValueError as exc:
        raise InvalidQuantumNumbers(f"expected integer quantum numbers, got {text!r}") from exc
    return QuantumState(n, l, m)
