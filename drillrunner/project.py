"""Generation of a rust-project.json file so that editors understand the exercises."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One exercise file presented to the language server as its own crate."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets the language server look inside test blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """Contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def add_path(self, path: str | os.PathLike) -> None:
        """Add a crate for the path if the text after its first dot is ``rs``."""
        text = str(path)
        _, dot, extension = text.partition(".")
        if dot and extension == "rs":
            self.crates.append(Crate(root_module=text))

    def exercises_to_json(self, root: str | os.PathLike = "exercises") -> None:
        """Add a crate for every source file found below ``root``."""
        for entry in sorted(Path(root).glob("**/*")):
            self.add_path(entry)

    def get_sysroot_src(self) -> None:
        """Ask the compiler for its sysroot and point at the standard library sources."""
        completed = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        )
        text = completed.stdout.decode("utf-8", "replace")
        tokens = text.split()
        toolchain = tokens[0] if tokens else text

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )

    def to_json(self) -> str:
        """Serialise the project as compact JSON."""
        return json.dumps(asdict(self), separators=(",", ":"), ensure_ascii=False)

    def write_to_disk(self, path: str | os.PathLike = "./rust-project.json") -> None:
        """Write the project file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")