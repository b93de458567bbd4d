"""Reading material template (.mtl) files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class MaterialData:
    """Material information; ``texture_handle`` is assigned by the texture loader."""

    texture_file_path: str = ""
    texture_handle: Optional[int] = None


def load_material_template_file(directory_path: PathLike, filename: PathLike) -> MaterialData:
    """Read a material file and take the diffuse texture path from ``map_Kd``.

    The texture path is the directory joined to the named file; the last
    ``map_Kd`` line wins. A missing file raises ``FileNotFoundError``.
    """
    directory = os.fspath(directory_path)
    material = MaterialData()
    with open(directory + "/" + os.fspath(filename), encoding="utf-8") as file:
        for line in file:
            tokens = line.split()
            if not tokens or tokens[0] != "map_Kd":
                continue
            texture_filename = tokens[1] if len(tokens) > 1 else ""
            material.texture_file_path = directory + "/" + texture_filename
    return material