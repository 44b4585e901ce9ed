"""Reading Wavefront-style scene and material files into a scene description."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from practicum.vector3 import Sphere, Triangle, Vector

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


@dataclass
class Light:
    """A point light source."""

    position: Vector
    intensity: Vector


@dataclass
class Material:
    """Surface properties read from a material library."""

    name: str = ""
    ambient_color: Vector = field(default_factory=Vector)
    diffuse_color: Vector = field(default_factory=Vector)
    specular_color: Vector = field(default_factory=Vector)
    intensity: Vector = field(default_factory=Vector)
    specular_exponent: float = 0.0
    refraction_index: float = 1.0
    albedo: Vector = field(default_factory=lambda: Vector(1, 0, 0))


@dataclass
class Object:
    """A triangular face with its texture coordinates and vertex normals."""

    polygon: Triangle
    texture: Triangle
    normal: Triangle
    material: Optional[Material] = None

    def normal_at(self, index: int) -> Vector:
        """Normal of the vertex with the given index."""
        return self.normal[index]


@dataclass
class SphereObject:
    """A sphere together with its material."""

    sphere: Sphere
    material: Optional[Material] = None


@dataclass
class Scene:
    """Objects, spheres, lights and materials that make up a scene."""

    objects: List[Object] = field(default_factory=list)
    sphere_objects: List[SphereObject] = field(default_factory=list)
    lights: List[Light] = field(default_factory=list)
    materials: Dict[str, Material] = field(default_factory=dict)

    def add_object(self, obj: Object) -> None:
        self.objects.append(obj)

    def add_sphere_object(self, sphere_object: SphereObject) -> None:
        self.sphere_objects.append(sphere_object)

    def add_light(self, light: Light) -> None:
        self.lights.append(light)

    def add_material(self, material: Material, name: str) -> None:
        """Register a material under a name unless that name is already taken."""
        self.materials.setdefault(name, material)

    def set_materials(self, materials: Dict[str, Material]) -> None:
        self.materials = dict(materials)

    def material(self, name: str) -> Material:
        """Material with the given name; raises KeyError if there is none."""
        return self.materials[name]

    def has_material(self, name: str) -> bool:
        return name in self.materials


def split(string: str, delimiters: Iterable[str] = " \t", skip_empty: bool = True) -> List[str]:
    """Split on any of the delimiter characters, dropping empty pieces if asked."""
    if not string:
        return []
    chars = "".join(delimiters)
    pieces = re.split(f"[{re.escape(chars)}]", string) if chars else [string]
    if skip_empty:
        return [piece for piece in pieces if piece]
    return pieces


def to_float(string: str) -> float:
    """Parse the leading number of a string, or 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(string)
    if match is None:
        return 0.0
    text = match.group(0)
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        return 0.0
    return value


def _to_int(string: str) -> int:
    match = _INT_PREFIX.match(string)
    return int(match.group(0)) if match else 0


def to_vector(data: Sequence[str], offset: int = 1) -> Vector:
    """Build a vector from three consecutive tokens starting at ``offset``."""
    return Vector(*(to_float(data[offset + i]) for i in range(3)))


def make_triangle(indexes: Sequence[int], data: Sequence[Vector]) -> Triangle:
    """Triangle from 1-based (or negative, counted from the end) indexes; 0 gives the origin."""
    vertices = []
    for index in indexes:
        if index == 0:
            vertices.append(Vector())
        elif index < 0:
            vertices.append(Vector(*data[len(data) + index]))
        else:
            vertices.append(Vector(*data[index - 1]))
    return Triangle(*vertices)


def _meaningful_lines(path: Path):
    with open(path, encoding="utf-8") as file:
        for line in file:
            elements = split(line.rstrip("\n"))
            if len(elements) < 2 or elements[0] == "#":
                continue
            yield elements


def read_materials(path: Union[str, PathLike]) -> Dict[str, Material]:
    """Read a material library file."""
    materials: Dict[str, Material] = {}
    current = ""

    def target() -> Material:
        return materials.setdefault(current, Material())

    for elements in _meaningful_lines(Path(path)):
        keyword = elements[0]
        if keyword == "newmtl":
            current = elements[1]
            target().name = current
        elif keyword == "Ka":
            target().ambient_color = to_vector(elements)
        elif keyword == "Kd":
            target().diffuse_color = to_vector(elements)
        elif keyword == "Ks":
            target().specular_color = to_vector(elements)
        elif keyword == "Ke":
            target().intensity = to_vector(elements)
        elif keyword == "Ns":
            target().specular_exponent = to_float(elements[1])
        elif keyword == "Ni":
            target().refraction_index = to_float(elements[1])
        elif keyword == "al":
            target().albedo = to_vector(elements)
    return materials


def read_scene(path: Union[str, PathLike]) -> Scene:
    """Read a scene file together with the material library it refers to."""
    path = Path(path)
    scene = Scene()
    material_name = ""
    positions: List[Vector] = []
    textures: List[Vector] = []
    normals: List[Vector] = []

    def current_material() -> Optional[Material]:
        if scene.has_material(material_name):
            return scene.material(material_name)
        return None

    for elements in _meaningful_lines(path):
        keyword = elements[0]
        if keyword == "mtllib":
            scene.set_materials(read_materials(path.parent / elements[1]))
        elif keyword == "usemtl":
            material_name = elements[1]
        elif keyword == "v":
            positions.append(to_vector(elements))
        elif keyword == "vt":
            textures.append(to_vector(elements))
        elif keyword == "vn":
            normals.append(to_vector(elements))
        elif keyword == "f":
            columns: List[List[int]] = [[], [], []]
            for token in elements[1:]:
                parts = split(token, "/", False)
                for j, column in enumerate(columns):
                    column.append(_to_int(parts[j]) if j < len(parts) and parts[j] else 0)
            v_idx, t_idx, n_idx = columns
            for i in range(2, len(v_idx)):
                scene.add_object(
                    Object(
                        make_triangle((v_idx[0], v_idx[i - 1], v_idx[i]), positions),
                        make_triangle((t_idx[0], t_idx[i - 1], t_idx[i]), textures),
                        make_triangle((n_idx[0], n_idx[i - 1], n_idx[i]), normals),
                        current_material(),
                    )
                )
        elif keyword == "S":
            sphere = Sphere(to_vector(elements), to_float(elements[4]))
            scene.add_sphere_object(SphereObject(sphere, current_material()))
        elif keyword == "P":
            scene.add_light(Light(to_vector(elements), to_vector(elements, 4)))
    return scene