"""Generation of rust-project.json so rust-analyzer understands the exercises."""

from __future__ import annotations

import json
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """A single crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class RustAnalyzerProject:
    """Contents of rust-project.json and the means to build them."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def add_path(self, path) -> None:
        """Add a crate for ``path`` if the text after its first dot is ``rs``."""
        path = str(path)
        _, sep, ext = path.partition(".")
        if sep and ext == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root="exercises") -> None:
        """Add a crate for every .rs file found below ``root``."""
        for entry in sorted(Path(root).glob("**/*")):
            self.add_path(str(entry))

    def get_sysroot_src(self) -> None:
        """Ask rustc for the toolchain and derive the standard library source path."""
        proc = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        text = proc.stdout.decode("utf-8", errors="replace")
        parts = text.split()
        toolchain = parts[0] if parts else text
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library")

    def to_dict(self) -> dict:
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [crate.to_dict() for crate in self.crates],
        }

    def write_to_disk(self, path="./rust-project.json") -> None:
        """Write the project as compact JSON."""
        data = json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
        Path(path).write_bytes(data.encode("utf-8"))