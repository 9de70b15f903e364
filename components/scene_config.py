import copy
from dataclasses import dataclass
from typing import Optional, Tuple

from components.material_registry import Material
from components.mesh_library import MeshKind
from components.texture_registry import DEFAULT_TEXTURE_UNIT_LIMIT

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]
Vec4 = Tuple[float, float, float, float]

MAX_POINT_LIGHTS = 4

# Mesh kinds loaded by default, in the order they are uploaded.
DEFAULT_MESH_KINDS = (
    MeshKind.PLANE,
    MeshKind.SPHERE,
    MeshKind.CYLINDER,
    MeshKind.BOX,
    MeshKind.CONE,
    MeshKind.PRISM,
    MeshKind.PYRAMID4,
    MeshKind.TAPERED_CYLINDER,
)


@dataclass(frozen=True)
class UniformNames:
    """Names of the shader uniforms written by the scene composer."""

    model: str = "model"
    object_color: str = "objectColor"
    object_texture: str = "objectTexture"
    use_texture: str = "bUseTexture"
    use_lighting: str = "bUseLighting"
    uv_scale: str = "UVscale"
    material: str = "material"
    directional_light: str = "directionalLight"
    point_lights: str = "pointLights"


@dataclass(frozen=True)
class DirectionalLight:
    direction: Vec3
    ambient: Vec3
    diffuse: Vec3
    specular: Vec3
    active: bool = True


@dataclass(frozen=True)
class PointLight:
    position: Vec3
    ambient: Vec3
    diffuse: Vec3
    specular: Vec3
    constant: float = 1.0
    linear: float = 0.09
    quadratic: float = 0.032
    active: bool = True


@dataclass(frozen=True)
class SceneObject:
    """
    One drawn instance: which mesh, where it goes, and how its surface is shaded.

    If `texture` is set the object is textured; otherwise it is drawn with the
    flat `color`.
    """

    name: str
    mesh: MeshKind
    scale: Vec3
    rotation_degrees: Vec3
    position: Vec3
    material: str
    texture: Optional[str] = None
    color: Vec4 = (1.0, 1.0, 1.0, 1.0)
    uv_scale: Vec2 = (1.0, 1.0)


class SceneConfig:
    """
    SceneConfig stores everything a scene needs before it can be prepared and rendered:
    - Textures to load (tag, path), in texture unit order
    - Materials to define
    - Directional and point lights
    - The ordered list of scene objects
    - Mesh kinds to upload and the shader uniform names
    """

    def __init__(
        self,
            # ------------------------------------------------------------------------------
            # Textures and Materials
            # ------------------------------------------------------------------------------
        texture_paths=None,
        materials=None,
        texture_unit_limit=DEFAULT_TEXTURE_UNIT_LIMIT,
        flip_textures_vertically=True,

            # ------------------------------------------------------------------------------
            # Lighting
            # ------------------------------------------------------------------------------
        directional_light=None,
        point_lights=None,

            # ------------------------------------------------------------------------------
            # Scene Content
            # ------------------------------------------------------------------------------
        objects=None,
        mesh_kinds=DEFAULT_MESH_KINDS,

            # ------------------------------------------------------------------------------
            # Shader Interface
            # ------------------------------------------------------------------------------
        uniform_names=None,

            # ------------------------------------------------------------------------------
            # Debug Mode
            # ------------------------------------------------------------------------------
        debug_mode=False,
    ):
        """
        All sequences are copied into tuples so a config cannot be mutated through
        the lists it was built from.
        """
        self.texture_paths = tuple(tuple(pair) for pair in (texture_paths or ()))
        self.materials = tuple(materials or ())
        self.texture_unit_limit = texture_unit_limit
        self.flip_textures_vertically = flip_textures_vertically

        self.directional_light = directional_light
        self.point_lights = tuple(point_lights or ())

        self.objects = tuple(objects or ())
        self.mesh_kinds = tuple(mesh_kinds)

        self.uniform_names = uniform_names or UniformNames()

        self.debug_mode = debug_mode

        self._validate_config()

    def unpack(self):
        """
        Unpack the configuration into a dictionary.
        Returns a deep copy so mutations won't affect this config.
        """
        return copy.deepcopy(self.__dict__)

    def _validate_config(self):
        """
        Private method to validate the configuration.
        Raises ValueError if invalid options or combinations are detected.
        """
        if len(self.point_lights) > MAX_POINT_LIGHTS:
            raise ValueError(
                f"Invalid point light count {len(self.point_lights)}. At most {MAX_POINT_LIGHTS} are supported."
            )

        if len(self.texture_paths) > self.texture_unit_limit:
            raise ValueError(
                f"Invalid texture count {len(self.texture_paths)}. "
                f"At most {self.texture_unit_limit} texture units are available."
            )

        for pair in self.texture_paths:
            if len(pair) != 2:
                raise ValueError(f"Invalid texture entry {pair!r}. Use (tag, path).")

        for material in self.materials:
            if not isinstance(material, Material):
                raise ValueError(f"Invalid material {material!r}. Use Material records.")

        for kind in self.mesh_kinds:
            if not isinstance(kind, MeshKind):
                raise ValueError(f"Invalid mesh kind {kind!r}.")

        for obj in self.objects:
            if not isinstance(obj.mesh, MeshKind):
                raise ValueError(f"Invalid mesh kind {obj.mesh!r} for scene object '{obj.name}'.")
            if obj.mesh not in self.mesh_kinds:
                raise ValueError(
                    f"Invalid scene object '{obj.name}': mesh kind {obj.mesh.value} is not in mesh_kinds."
                )
            if obj.texture is None and obj.color is None:
                raise ValueError(f"Invalid scene object '{obj.name}'. Set a texture tag or a flat color.")
