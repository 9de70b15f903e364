import os

from components.material_registry import Material
from components.mesh_library import MeshKind
from components.scene_config import DirectionalLight, PointLight, SceneConfig, SceneObject
from config.path_config import textures_dir

# ------------------------------------------------------------------------------
# Textures (tag, file name), in texture unit order
# ------------------------------------------------------------------------------
TEXTURE_FILES = [
    ("leaf", "leaf.jpg"),
    ("vase", "vase.jpg"),
    ("floor", "floor.jpg"),
    ("wall", "wall.jpg"),
    ("ottoman", "ottoman.jpg"),
    ("pillow", "pillow.jpg"),
    ("bookshelf", "bookshelf.jpg"),
    ("picture", "picture.jpg"),
    ("rug", "rug.jpg"),
    ("lamp_bot", "lamp_bot.jpg"),
    ("lamp_top", "lamp_top.jpg"),
    ("books", "books.jpg"),
    ("book2", "book2.jpg"),
    ("snowglobe_bot", "snowglobe_bot.jpg"),
]

# ------------------------------------------------------------------------------
# Materials
# ------------------------------------------------------------------------------
MATERIALS = [
    Material("metal", diffuse_color=(0.5, 0.5, 0.5), specular_color=(0.6, 0.6, 0.6), shininess=70.0),
    Material("wood", diffuse_color=(0.3, 0.3, 0.3), specular_color=(0.4, 0.4, 0.4), shininess=40.0),
    Material("glass", diffuse_color=(0.2, 0.2, 0.2), specular_color=(1.0, 1.0, 1.0), shininess=95.0),
    Material("vase", diffuse_color=(0.4, 0.4, 0.4), specular_color=(0.5, 0.5, 0.5), shininess=40.0),
    Material("wall", diffuse_color=(0.8, 0.8, 0.9), specular_color=(0.0, 0.0, 0.0), shininess=2.0),
    Material("leaf", diffuse_color=(0.4, 0.2, 0.4), specular_color=(0.1, 0.05, 0.1), shininess=0.3),
    Material("paper", diffuse_color=(0.5, 0.5, 0.5), specular_color=(0.0, 0.0, 0.0), shininess=1.0),
    Material("fabric", diffuse_color=(0.5, 0.5, 0.5), specular_color=(0.0, 0.0, 0.0), shininess=1.0),
]

# ------------------------------------------------------------------------------
# Lights
# ------------------------------------------------------------------------------
DIRECTIONAL_LIGHT = DirectionalLight(
    direction=(-7.0, 10.0, -10.0),
    ambient=(0.2, 0.2, 0.2),
    diffuse=(0.7, 0.7, 0.7),
    specular=(0.0, 0.0, 0.0),
)

POINT_LIGHTS = [
    # Ceiling light over the ottoman
    PointLight(position=(14.0, 35.0, 5.0), ambient=(0.08, 0.08, 0.08), diffuse=(0.4, 0.4, 0.4), specular=(0.2, 0.2, 0.2)),
    # Ceiling light over the bookshelf
    PointLight(position=(14.0, 35.0, -17.0), ambient=(0.08, 0.08, 0.08), diffuse=(0.4, 0.4, 0.4), specular=(0.2, 0.2, 0.2)),
    # Two bulbs inside the lamp shade
    PointLight(position=(-2.0, 13.0, -17.0), ambient=(0.05, 0.05, 0.05), diffuse=(0.3, 0.3, 0.3), specular=(0.1, 0.1, 0.1)),
    PointLight(position=(-2.0, 13.0, -15.0), ambient=(0.05, 0.05, 0.05), diffuse=(0.3, 0.3, 0.3), specular=(0.1, 0.1, 0.1)),
]

# ------------------------------------------------------------------------------
# Scene Objects (draw order)
# ------------------------------------------------------------------------------
OBJECTS = [
    # Room
    SceneObject("floor", MeshKind.PLANE, (20.0, 1.0, 20.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), "wood", texture="floor"),
    SceneObject("wall_right", MeshKind.PLANE, (20.0, 1.0, 20.0), (90.0, 90.0, 0.0), (20.0, 20.0, 0.0), "wall", texture="wall"),
    SceneObject("wall_back", MeshKind.PLANE, (20.0, 1.0, 20.0), (90.0, 0.0, 90.0), (0.0, 20.0, -20.0), "wall", texture="wall"),

    # Potted plant
    SceneObject("leaf_1", MeshKind.PYRAMID4, (0.5, 1.5, 0.5), (45.0, -90.0, 0.0), (-0.5, 3.0, 0.0), "leaf", texture="leaf"),
    SceneObject("leaf_2", MeshKind.PYRAMID4, (0.5, 1.5, 0.5), (-45.0, 0.0, 0.0), (0.0, 3.0, -0.5), "leaf", texture="leaf"),
    SceneObject("leaf_3", MeshKind.PYRAMID4, (0.5, 1.5, 0.5), (45.0, 0.0, 0.0), (0.0, 3.0, 0.5), "leaf", texture="leaf"),
    SceneObject("leaf_4", MeshKind.PYRAMID4, (0.5, 1.5, 0.5), (-45.0, -90.0, 0.0), (0.5, 3.0, 0.0), "leaf", texture="leaf"),
    SceneObject("leaf_base", MeshKind.PYRAMID4, (0.5, 1.5, 0.5), (0.0, 0.0, 0.0), (0.0, 3.2, 0.0), "leaf", texture="leaf"),
    SceneObject("vase", MeshKind.TAPERED_CYLINDER, (1.0, 1.5, 1.0), (180.0, 0.0, 0.0), (0.0, 2.4, 0.0), "vase", texture="vase"),

    # Ottoman and pillows
    SceneObject("ottoman", MeshKind.CYLINDER, (6.0, 5.0, 6.0), (0.0, 0.0, 0.0), (14.0, 0.0, 5.0), "fabric", texture="ottoman"),
    SceneObject("pillow_1", MeshKind.BOX, (5.0, 1.0, 5.0), (-75.0, 120.0, 0.0), (16.0, 7.5, 3.0), "fabric", texture="pillow"),
    SceneObject("pillow_2", MeshKind.BOX, (5.0, 1.0, 5.0), (90.0, 90.0, -20.0), (18.0, 7.5, 6.0), "fabric", texture="pillow"),

    # Bookshelf
    SceneObject("bookshelf_back", MeshKind.BOX, (15.0, 0.5, 20.0), (90.0, 0.0, 0.0), (10.8, 10.0, -20.0), "wood", texture="bookshelf"),
    SceneObject("bookshelf_middle", MeshKind.BOX, (7.0, 0.5, 15.0), (0.0, 90.0, 0.0), (10.8, 10.0, -18.0), "wood", texture="bookshelf"),
    SceneObject("bookshelf_upper", MeshKind.BOX, (7.0, 0.5, 15.0), (0.0, 90.0, 0.0), (10.8, 15.0, -18.0), "wood", texture="bookshelf"),
    SceneObject("bookshelf_lower", MeshKind.BOX, (7.0, 0.5, 15.0), (0.0, 90.0, 0.0), (10.8, 5.0, -18.0), "wood", texture="bookshelf"),
    SceneObject("bookshelf_top", MeshKind.BOX, (7.0, 0.5, 15.0), (0.0, 90.0, 0.0), (10.8, 20.0, -18.0), "wood", texture="bookshelf"),
    SceneObject("bookshelf_bottom", MeshKind.BOX, (7.0, 0.5, 15.0), (0.0, 90.0, 0.0), (10.8, 0.0, -18.0), "wood", texture="bookshelf"),
    SceneObject("bookshelf_left", MeshKind.BOX, (7.0, 0.5, 20.0), (90.0, 90.0, 0.0), (3.4, 10.0, -18.0), "wood", texture="bookshelf"),
    SceneObject("bookshelf_right", MeshKind.BOX, (7.0, 0.5, 20.0), (90.0, 90.0, 0.0), (18.4, 10.0, -18.0), "wood", texture="bookshelf"),

    # Wall picture and rug
    SceneObject("picture", MeshKind.BOX, (8.0, 0.5, 11.0), (90.0, 90.0, 0.0), (19.8, 20.0, 0.0), "paper", texture="picture"),
    SceneObject("rug", MeshKind.BOX, (10.0, 0.3, 15.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), "fabric", texture="rug"),

    # Floor lamp; the shade keeps a dim flat color for when its texture is missing
    SceneObject(
        "lamp_shade",
        MeshKind.TAPERED_CYLINDER,
        (2.0, 3.5, 2.0),
        (0.0, 0.0, 0.0),
        (-2.0, 13.0, -17.0),
        "paper",
        texture="lamp_top",
        color=(0.3, 0.3, 0.3, 0.3),
    ),
    SceneObject("lamp_pole", MeshKind.CYLINDER, (0.3, 13.0, 0.3), (0.0, 0.0, 0.0), (-2.0, 0.5, -17.0), "metal", texture="lamp_bot"),
    SceneObject("lamp_base", MeshKind.CYLINDER, (2.0, 0.5, 2.0), (0.0, 0.0, 0.0), (-2.0, 0.0, -17.0), "metal", texture="lamp_bot"),

    # Books
    SceneObject("book_1", MeshKind.BOX, (3.0, 1.0, 4.0), (90.0, 90.0, 0.0), (17.6, 12.0, -18.0), "fabric", texture="books"),
    SceneObject("book_2", MeshKind.BOX, (3.0, 1.0, 5.0), (90.0, 90.0, 0.0), (16.3, 12.5, -18.0), "fabric", texture="book2"),
    SceneObject("book_3", MeshKind.BOX, (3.0, 1.0, 4.0), (90.0, 90.0, 0.0), (15.0, 12.0, -18.0), "fabric", texture="books"),
    SceneObject("book_4", MeshKind.BOX, (3.0, 1.0, 4.0), (90.0, 90.0, 0.0), (4.2, 17.0, -18.0), "fabric", texture="books"),
    SceneObject("book_5", MeshKind.BOX, (3.0, 1.0, 5.0), (90.0, 90.0, 0.0), (5.4, 17.4, -18.0), "fabric", texture="book2"),
    SceneObject("book_6", MeshKind.BOX, (2.9, 1.0, 3.8), (90.0, 90.0, 20.0), (7.0, 17.1, -18.0), "fabric", texture="books"),

    # Snow globe
    SceneObject("snowglobe_base", MeshKind.TAPERED_CYLINDER, (1.0, 1.0, 1.0), (0.0, 0.0, 0.0), (7.0, 5.0, -17.0), "metal", texture="snowglobe_bot"),
    SceneObject("snowglobe_dome", MeshKind.SPHERE, (0.9, 0.9, 0.9), (0.0, 0.0, 0.0), (7.0, 6.7, -17.0), "glass", texture="lamp_bot"),
]


def create_scene_config(texture_dir=textures_dir, debug_mode=False):
    """
    Build the SceneConfig for the living room.

    Args:
        texture_dir (str): Directory holding the texture images.
        debug_mode (bool): Check for GL errors after each setup/render phase.

    Returns:
        SceneConfig: The complete living room scene.
    """
    return SceneConfig(
        texture_paths=[(tag, os.path.join(texture_dir, filename)) for tag, filename in TEXTURE_FILES],
        materials=MATERIALS,
        directional_light=DIRECTIONAL_LIGHT,
        point_lights=POINT_LIGHTS,
        objects=OBJECTS,
        debug_mode=debug_mode,
    )
