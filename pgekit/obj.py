"""Wavefront OBJ and MTL loading into flat, triangle-ordered vertex lists."""

from __future__ import annotations

import enum
import math
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from pgekit.mathlib import sqrt

__all__ = [
    "Material",
    "VertexFormat",
    "Vertex",
    "ObjModel",
    "parse_materials",
    "load_materials",
    "parse_obj",
    "load_obj",
]

_MAX_LINE = 512
_DEFAULT_COLOR = 0xFFFFFFFF

_FACE_FULL = re.compile(r"(-?\d+)/(-?\d+)/(-?\d+)")
_FACE_NORMAL = re.compile(r"(-?\d+)//(-?\d+)")
_FACE_TEXTURE = re.compile(r"(-?\d+)/(-?\d+)")
_FACE_PLAIN = re.compile(r"(-?\d+)")


@dataclass
class Material:
    """A material entry from an MTL file."""

    name: str = ""
    ambient: tuple[float, float, float] = (0.0, 0.0, 0.0)
    diffuse: tuple[float, float, float] = (0.0, 0.0, 0.0)
    specular: tuple[float, float, float] = (0.0, 0.0, 0.0)
    shininess: float = 0.0

    @property
    def color(self) -> int:
        """Ambient colour packed as 0xAABBGGRR with full alpha."""
        r, g, b = (int(c * 255.0) & 0xFF for c in self.ambient)
        return (0xFF << 24) | (b << 16) | (g << 8) | r


class VertexFormat(enum.Flag):
    """Which components each vertex of a model carries."""

    POSITION = enum.auto()
    TEXTURE = enum.auto()
    NORMAL = enum.auto()
    COLOR = enum.auto()


@dataclass(frozen=True)
class Vertex:
    """One output vertex; absent components are None."""

    position: tuple[float, float, float]
    uv: tuple[float, float] | None = None
    normal: tuple[float, float, float] | None = None
    color: int | None = None


@dataclass
class ObjModel:
    """A triangle list: every three consecutive vertices form one face."""

    format: VertexFormat
    vertices: list[Vertex] = field(default_factory=list)

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)


def _lines(data: bytes) -> Iterator[str]:
    """Yield lines with leading control/blank characters skipped.

    Lines longer than the line limit are cut into several pieces.
    """
    pos = 0
    end = len(data)
    while pos < end:
        while pos < end and data[pos] < 33:
            pos += 1
        start = pos
        while pos < end and data[pos] != 0x0A and pos - start < _MAX_LINE:
            pos += 1
        if pos > start:
            yield data[start:pos].decode("latin-1")


def _floats(rest: str, count: int) -> list[float]:
    values: list[float] = []
    for token in rest.split()[:count]:
        try:
            values.append(float(token))
        except ValueError:
            break
    values.extend([0.0] * (count - len(values)))
    return values


def _first_word(rest: str) -> str:
    words = rest.split()
    return words[0] if words else ""


def _as_bytes(data: bytes | str) -> bytes:
    return data.encode("latin-1") if isinstance(data, str) else bytes(data)


def parse_materials(data: bytes | str) -> list[Material]:
    """Parse MTL text.

    Ka, Kd, Ks and Ns lines fill materials in the order they appear,
    independently of the newmtl lines around them.
    """
    lines = list(_lines(_as_bytes(data)))
    materials = [Material() for line in lines if line.startswith("newmtl")]
    counters = {"newmtl": 0, "Ka": 0, "Kd": 0, "Ks": 0, "Ns": 0}

    def _next(key: str) -> Material:
        index = counters[key]
        if index >= len(materials):
            raise ValueError(f"more {key} entries than materials")
        counters[key] = index + 1
        return materials[index]

    for line in lines:
        if line.startswith("newmtl"):
            _next("newmtl").name = _first_word(line[6:])
        elif line.startswith("Ka"):
            _next("Ka").ambient = tuple(_floats(line[2:], 3))  # type: ignore[assignment]
        elif line.startswith("Kd"):
            _next("Kd").diffuse = tuple(_floats(line[2:], 3))  # type: ignore[assignment]
        elif line.startswith("Ks"):
            _next("Ks").specular = tuple(_floats(line[2:], 3))  # type: ignore[assignment]
        elif line.startswith("Ns"):
            _next("Ns").shininess = _floats(line[2:], 1)[0]
    return materials


def load_materials(path: str | Path) -> list[Material]:
    """Read and parse an MTL file."""
    return parse_materials(Path(path).read_bytes())


def _color_for(materials: list[Material] | None, name: str) -> int:
    if materials is None:
        raise ValueError("usemtl before any mtllib")
    for material in materials:
        if material.name == name:
            return material.color
    raise KeyError(name)


def _parse_face(rest: str, has_tex: bool, has_normal: bool) -> list[tuple[int, int | None]]:
    tokens = rest.split()
    if len(tokens) < 3:
        raise ValueError(f"face needs three vertices: {rest.strip()!r}")
    corners: list[tuple[int, int | None]] = []
    for token in tokens[:3]:
        if has_tex and has_normal:
            m = _FACE_FULL.fullmatch(token)
        elif has_normal:
            m = _FACE_NORMAL.fullmatch(token)
        elif has_tex:
            m = _FACE_TEXTURE.fullmatch(token)
        else:
            m = _FACE_PLAIN.fullmatch(token)
        if m is None:
            raise ValueError(f"malformed face vertex: {token!r}")
        vertex = int(m.group(1))
        texcoord = int(m.group(2)) if has_tex else None
        corners.append((vertex, texcoord))
    return corners


def _lookup(items: list, index: int, what: str):
    if index < 1 or index > len(items):
        raise ValueError(f"{what} index {index} out of range")
    return items[index - 1]


def parse_obj(data: bytes | str, material_dir: str | Path = ".") -> ObjModel:
    """Parse OBJ text into a triangle list.

    Material libraries named by mtllib are read from ``material_dir``.
    Normals are derived from the normalised vertex position.
    """
    lines = list(_lines(_as_bytes(data)))

    num_normal = num_tex = num_material = 0
    for line in lines:
        if line.startswith("vn"):
            num_normal += 1
        elif line.startswith("vt"):
            num_tex += 1
        elif line.startswith("v") or line.startswith("f"):
            pass
        elif line.startswith("mtllib"):
            num_material += 1

    has_tex = num_tex > 0
    has_normal = num_normal > 0
    has_color = num_material > 0

    positions: list[tuple[float, float, float]] = []
    texcoords: list[tuple[float, float]] = []
    faces: list[tuple[list[tuple[int, int | None]], int]] = []
    materials: list[Material] | None = None
    current_color = _DEFAULT_COLOR

    for line in lines:
        if line.startswith("vn"):
            continue
        if line.startswith("vt"):
            u, v = _floats(line[2:], 2)
            texcoords.append((u, v))
        elif line.startswith("v"):
            x, y, z = _floats(line[1:], 3)
            positions.append((x, y, z))
        elif line.startswith("f"):
            faces.append((_parse_face(line[1:], has_tex, has_normal), current_color))
        elif line.startswith("mtllib"):
            materials = load_materials(Path(material_dir) / _first_word(line[6:]))
        elif line.startswith("usemtl"):
            current_color = _color_for(materials, _first_word(line[6:]))

    fmt = VertexFormat.POSITION
    if has_tex:
        fmt |= VertexFormat.TEXTURE
    if has_normal:
        fmt |= VertexFormat.NORMAL
    if has_color:
        fmt |= VertexFormat.COLOR

    vertices: list[Vertex] = []
    for corners, color in faces:
        for vertex_index, tex_index in corners:
            position = _lookup(positions, vertex_index, "vertex")
            uv = None
            if has_tex:
                u, v = _lookup(texcoords, tex_index, "texture coordinate")
                uv = (u, 1.0 - v)
            normal = None
            if has_normal:
                length = sqrt(sum(c * c for c in position))
                inv = 1.0 / length if length else math.inf
                normal = tuple(c * inv for c in position)
            vertices.append(
                Vertex(
                    position=position,
                    uv=uv,
                    normal=normal,  # type: ignore[arg-type]
                    color=color if has_color else None,
                )
            )
    return ObjModel(format=fmt, vertices=vertices)


def load_obj(path: str | Path) -> ObjModel:
    """Read and parse an OBJ file; material libraries sit beside it."""
    path = Path(path)
    return parse_obj(path.read_bytes(), path.parent)