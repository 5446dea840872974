"""Write generated code to disk under an output directory."""

from __future__ import annotations

from pathlib import Path

from promptcode.schema import GeneratedCode

FALLBACK_FILENAME = "generated.txt"


def write_generated(result: GeneratedCode, out_dir: str | Path, overwrite: bool = False) -> Path:
    """Write *result.code* to ``out_dir / result.file_path`` and return the path.

    Raises FileExistsError when the target exists and *overwrite* is False,
    and ValueError when the suggested path points outside *out_dir*.
    """
    root = Path(out_dir).resolve()
    target = (root / (result.file_path or FALLBACK_FILENAME)).resolve()
    if root != target and root not in target.parents:
        raise ValueError(f"Refusing to write outside {root}: {result.file_path}")
    if target.exists() and not overwrite:
        raise FileExistsError(f"{target} already exists (use overwrite to replace it)")

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(result.code, encoding="utf-8")
    return target
