"""Split command arguments into a preamble and prefixed values.

For `1 p/12345678 p/87654321 n/Alice`, the preamble is `1`, PHONE maps to
`["12345678", "87654321"]` and NAME to `["Alice"]`. A prefix only counts when
it starts the string or follows whitespace, so `x.com/n/` inside a link is
not mistaken for a name.
"""

from dataclasses import dataclass

from networkbook.application.cli_syntax import Prefix
from networkbook.application.errors import TokenizeFormatError


class ArgumentMultimap:
    """Prefix -> values in the order they were given, plus the preamble."""

    def __init__(self, preamble: str = "") -> None:
        self._preamble = preamble
        self._values: dict[Prefix, list[str]] = {}

    def put(self, prefix: Prefix, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    @property
    def preamble(self) -> str:
        return self._preamble

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value given for prefix, or None if it was not given."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def is_present(self, prefix: Prefix) -> bool:
        return prefix in self._values

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """Raise TokenizeFormatError if any of prefixes was given more than once."""
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]
        if duplicated:
            listed = " ".join(str(p) for p in duplicated)
            raise TokenizeFormatError(
                f"Multiple values specified for the following single-valued field(s): {listed}"
            )


@dataclass(frozen=True)
class _PrefixPosition:
    prefix: Prefix
    start: int


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Tokenize args using only the given prefixes. Other text stays inside values."""
    positions = sorted(
        (
            _PrefixPosition(prefix, start)
            for prefix in prefixes
            for start in _find_prefix_positions(args, prefix.value)
        ),
        key=lambda p: p.start,
    )
    return _extract_arguments(args, positions)


def _find_prefix_positions(args: str, marker: str) -> list[int]:
    positions = []
    start = args.find(marker)
    while start != -1:
        if start == 0 or args[start - 1].isspace():
            positions.append(start)
        start = args.find(marker, start + 1)
    return positions


def _extract_arguments(args: str, positions: list[_PrefixPosition]) -> ArgumentMultimap:
    preamble_end = positions[0].start if positions else len(args)
    multimap = ArgumentMultimap(preamble=args[:preamble_end].strip())
    for i, current in enumerate(positions):
        end = positions[i + 1].start if i + 1 < len(positions) else len(args)
        value = args[current.start + len(current.prefix.value) : end].strip()
        multimap.put(current.prefix, value)
    return multimap
