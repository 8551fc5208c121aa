from __future__ import annotations

from tokendiff.lcs_table import Alignment

SGR_CODES: dict[str, int] = {
    "normal": 0,
    "red": 31,
    "green": 32,
}

ALIGNMENT_FORMATS: dict[Alignment, str] = {
    Alignment.SHARED: "normal",
    Alignment.ONLY_IN_X: "red",
    Alignment.ONLY_IN_Y: "green",
}

ALIGNMENT_SYMBOLS: dict[Alignment, str] = {
    Alignment.SHARED: " ",
    Alignment.ONLY_IN_X: "-",
    Alignment.ONLY_IN_Y: "+",
}


class Color:
    @staticmethod
    def format(style: str | list[str], text: str) -> str:
        names = [style] if isinstance(style, str) else list(style)

        try:
            codes = [SGR_CODES[name] for name in names]
        except KeyError as e:
            raise ValueError(f"Unknown style name: {e}") from e

        code_str = ";".join(str(c) for c in codes)
        return f"\x1b[{code_str}m{text}\x1b[0m"
