import pytest

from practicum.scene import (
    Light,
    Material,
    Object,
    Scene,
    make_triangle,
    read_materials,
    read_scene,
    split,
    to_float,
    to_vector,
)
from practicum.vector3 import Triangle, Vector

MTL = """# materials
newmtl floor
Ka 0.78 0.78 0.78
Kd 0.725 0.71 0.68
Ks 0 0 0
Ns 10
Ni 1.5
Ke 1 1 1
al 0.5 0 0

newmtl rightSphere
Ns 1024
Ni 1.8
al 0 0.3 0.7
"""

OBJ = """# scene
mtllib scene.mtl
single
v 1 0 -1.04
v -0.99 0 -1.04
v -1.01 0 0.99
v 1 0 0.99
vn 0 1 0
vn 0.9999 0.0135 0.0057
usemtl floor
f 1//1 2//1 3//1 4//1
usemtl rightSphere
S 0.3 0.3 0 0.3
usemtl missing
f -1/ -2 -3//-1
P 0 1.5899 0 1 1 1
P 0 0.7 1.98 0.5 0.5 0.5
"""


def check(vector, x, y=None, z=None):
    if y is None:
        y = z = x
    assert list(vector) == pytest.approx([x, y, z], abs=1e-12)


@pytest.fixture
def scene(tmp_path):
    (tmp_path / "scene.mtl").write_text(MTL)
    obj = tmp_path / "scene.obj"
    obj.write_text(OBJ)
    return read_scene(obj)


def test_objects(scene):
    assert len(scene.objects) == 3
    first = scene.objects[0]
    check(first.polygon[0], 1.0, 0.0, -1.04)
    check(first.polygon[1], -0.99, 0.0, -1.04)
    check(first.polygon[2], -1.01, 0.0, 0.99)
    assert first.material.name == "floor"
    for i in range(3):
        check(first.normal_at(i), 0.0, 1.0, 0.0)

    second = scene.objects[1]
    check(second.polygon[0], 1.0, 0.0, -1.04)
    check(second.polygon[1], -1.01, 0.0, 0.99)
    check(second.polygon[2], 1.0, 0.0, 0.99)


def test_negative_indexes_and_missing_material(scene):
    obj = scene.objects[2]
    check(obj.polygon[0], 1.0, 0.0, 0.99)
    check(obj.polygon[1], -1.01, 0.0, 0.99)
    check(obj.polygon[2], -0.99, 0.0, -1.04)
    check(obj.normal_at(0), 0.0)
    check(obj.normal_at(1), 0.0)
    check(obj.normal_at(2), 0.9999, 0.0135, 0.0057)
    check(obj.texture[0], 0.0)
    assert obj.material is None


def test_spheres_and_lights(scene):
    assert len(scene.sphere_objects) == 1
    sphere = scene.sphere_objects[0]
    check(sphere.sphere.center, 0.3, 0.3, 0.0)
    assert sphere.sphere.radius == pytest.approx(0.3)
    assert sphere.material.name == "rightSphere"

    assert len(scene.lights) == 2
    check(scene.lights[0].position, 0.0, 1.5899, 0.0)
    check(scene.lights[0].intensity, 1.0)
    check(scene.lights[1].position, 0.0, 0.7, 1.98)
    check(scene.lights[1].intensity, 0.5)


def test_materials(scene):
    assert set(scene.materials) == {"floor", "rightSphere"}
    floor = scene.material("floor")
    assert floor.specular_exponent == pytest.approx(10.0)
    assert floor.refraction_index == pytest.approx(1.5)
    check(floor.ambient_color, 0.78)
    check(floor.diffuse_color, 0.725, 0.71, 0.68)
    check(floor.specular_color, 0.0)
    check(floor.intensity, 1.0)
    check(floor.albedo, 0.5, 0.0, 0.0)

    right = scene.material("rightSphere")
    assert right.specular_exponent == pytest.approx(1024.0)
    assert right.refraction_index == pytest.approx(1.8)
    check(right.ambient_color, 0.0)
    check(right.albedo, 0.0, 0.3, 0.7)
    for obj in scene.objects[:2]:
        assert obj.material.name in scene.materials


def test_material_defaults(tmp_path):
    path = tmp_path / "m.mtl"
    path.write_text("newmtl plain\nKd 0.2 0.7 0.8\n")
    materials = read_materials(path)
    plain = materials["plain"]
    check(plain.diffuse_color, 0.2, 0.7, 0.8)
    check(plain.albedo, 1.0, 0.0, 0.0)
    assert plain.refraction_index == 1.0


def test_properties_before_newmtl_go_to_unnamed(tmp_path):
    path = tmp_path / "m.mtl"
    path.write_text("Ns 5\nnewmtl a\n")
    materials = read_materials(path)
    assert materials[""].specular_exponent == 5.0
    assert materials[""].name == ""


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_scene(tmp_path / "absent.obj")


def test_split():
    assert split("a  b\tc") == ["a", "b", "c"]
    assert split("") == []
    assert split("1//2", "/", False) == ["1", "", "2"]
    assert split("1/", "/", False) == ["1", ""]


def test_to_float():
    assert to_float("1.5") == 1.5
    assert to_float("2.5abc") == 2.5
    assert to_float("abc") == 0.0
    assert to_float("-3e2") == -300.0
    assert to_float("1e999") == 0.0


def test_to_vector():
    check(to_vector(["v", "1", "2", "3"]), 1.0, 2.0, 3.0)
    check(to_vector(["P", "0", "0", "0", "4", "5", "6"], 4), 4.0, 5.0, 6.0)
    with pytest.raises(IndexError):
        to_vector(["v", "1"])


def test_make_triangle():
    data = [Vector(1, 1, 1), Vector(2, 2, 2), Vector(3, 3, 3)]
    triangle = make_triangle((1, -1, 0), data)
    check(triangle[0], 1.0)
    check(triangle[1], 3.0)
    check(triangle[2], 0.0)
    triangle[0][0] = 9
    assert data[0][0] == 1.0


def test_scene_container():
    scene = Scene()
    first = Material(name="a")
    scene.add_material(first, "a")
    scene.add_material(Material(name="other"), "a")
    assert scene.material("a") is first
    assert scene.has_material("a")
    assert not scene.has_material("b")
    with pytest.raises(KeyError):
        scene.material("b")
    tri = Triangle(Vector(), Vector(1, 0, 0), Vector(0, 1, 0))
    scene.add_object(Object(tri, tri, tri))
    scene.add_light(Light(Vector(), Vector(1, 1, 1)))
    assert len(scene.objects) == 1
    assert len(scene.lights) == 1