"""
SceneComposer Module

This module defines the SceneComposer class, which turns a SceneConfig into
GL state and draw calls. Setup happens once in prepare(): textures are
loaded and bound to texture units, materials are defined, lights are pushed
to the shader and every mesh kind is uploaded. After that, render() walks the
scene objects in their declared order and, for each one, sets the model
matrix, the surface (texture or flat color), the material, and draws the mesh.

Nothing in the scene animates, so every render() call produces the same
uniform values and the same draw sequence.
"""

import logging

from components.light_configurator import LightConfigurator
from components.material_registry import MaterialRegistry
from components.texture_registry import NOT_FOUND, TextureRegistry
from components.transform_builder import TransformBuilder
from utils.gl_debug import check_gl_error

logger = logging.getLogger(__name__)

FALLBACK_COLOR = (1.0, 1.0, 1.0, 1.0)


class SceneComposer:
    """
    SceneComposer prepares and renders a static scene of textured, lit meshes.
    """

    def __init__(self, config, shader_uniforms, mesh_library, texture_registry=None, material_registry=None):
        """
        Args:
            config (SceneConfig): Textures, materials, lights and objects to draw.
            shader_uniforms (ShaderUniforms): Uniform writer for the scene's shader program.
            mesh_library (MeshLibrary): Loads and draws the mesh kinds.
            texture_registry (TextureRegistry, optional): Defaults to one built from the config.
            material_registry (MaterialRegistry, optional): Defaults to an empty registry.
        """
        self.config = config
        self.shader_uniforms = shader_uniforms
        self.mesh_library = mesh_library
        self.uniform_names = config.uniform_names
        self.debug_mode = config.debug_mode

        if texture_registry is None:
            texture_registry = TextureRegistry(
                texture_unit_limit=config.texture_unit_limit,
                flip_vertically=config.flip_textures_vertically,
            )
        if material_registry is None:
            material_registry = MaterialRegistry()
        self.texture_registry = texture_registry
        self.material_registry = material_registry
        self.transform_builder = TransformBuilder(shader_uniforms, model_uniform=self.uniform_names.model)
        self.light_configurator = LightConfigurator(shader_uniforms, uniform_names=self.uniform_names)

        self.prepared = False
        self._warned_tags = set()

    # --------------------------------------------------------------------------
    # Setup
    # --------------------------------------------------------------------------
    def prepare(self):
        """
        Load textures, define materials, configure lights and upload meshes.
        """
        self.shader_uniforms.use_shader_program()

        self.load_scene_textures()
        check_gl_error("load_scene_textures", self.debug_mode)

        self.define_object_materials()

        self.setup_scene_lights()
        check_gl_error("setup_scene_lights", self.debug_mode)

        self.load_meshes()
        check_gl_error("load_meshes", self.debug_mode)

        self.prepared = True
        logger.info(
            "[SceneComposer] Scene prepared: %d textures, %d materials, %d objects",
            len(self.texture_registry),
            len(self.material_registry),
            len(self.config.objects),
        )

    def load_scene_textures(self):
        """
        Load every configured texture and bind the loaded ones to their texture units.
        """
        self.texture_registry.load_all(self.config.texture_paths)
        self.texture_registry.bind_all()

    def define_object_materials(self):
        self.material_registry.define_all(self.config.materials)

    def setup_scene_lights(self):
        self.light_configurator.configure(self.config.directional_light, self.config.point_lights)

    def load_meshes(self):
        """
        Upload each configured mesh kind once, however many objects use it.
        """
        loaded = set()
        for kind in self.config.mesh_kinds:
            if kind in loaded:
                continue
            self.mesh_library.load_mesh(kind)
            loaded.add(kind)

    # --------------------------------------------------------------------------
    # Rendering
    # --------------------------------------------------------------------------
    def render(self):
        """
        Draw every scene object in declared order.
        """
        if not self.prepared:
            raise RuntimeError("Scene must be prepared before it can be rendered.")

        self.shader_uniforms.use_shader_program()
        for obj in self.config.objects:
            self.render_object(obj)
        check_gl_error("render", self.debug_mode)

    def render_object(self, obj):
        """
        Set the transform, surface and material for one object, then draw its mesh.
        """
        self.set_transformations(obj)
        self.set_shader_surface(obj)
        self.set_shader_material(obj.material)
        self.mesh_library.draw_mesh(obj.mesh)

    def set_transformations(self, obj):
        return self.transform_builder.apply(obj.scale, obj.rotation_degrees, obj.position)

    def set_shader_surface(self, obj):
        """
        Texture the object if its texture tag resolves; otherwise use its flat color.
        """
        if obj.texture is not None:
            if self.set_shader_texture(obj.texture, obj.uv_scale):
                return
            self._warn_once("texture", obj.texture)
        self.set_shader_color(obj.color if obj.color is not None else FALLBACK_COLOR)

    def set_shader_texture(self, texture_tag, uv_scale=(1.0, 1.0)):
        """
        Sample the texture registered under `texture_tag` for the next draw call.

        Returns:
            bool: False if no texture carries the tag; nothing is set in that case.
        """
        slot = self.texture_registry.find_slot(texture_tag)
        if slot == NOT_FOUND:
            return False

        self.shader_uniforms.set_bool(self.uniform_names.use_texture, True)
        self.shader_uniforms.set_sampler2d(self.uniform_names.object_texture, slot)
        self.shader_uniforms.set_vec2(self.uniform_names.uv_scale, uv_scale)
        return True

    def set_shader_color(self, color):
        """
        Draw the next mesh with a flat RGBA color instead of a texture.
        """
        self.shader_uniforms.set_bool(self.uniform_names.use_texture, False)
        self.shader_uniforms.set_vec4(self.uniform_names.object_color, color)

    def set_shader_material(self, material_tag):
        """
        Pass the named material's colors and shininess to the shader.

        Returns:
            bool: False if the material is not defined; nothing is set in that case.
        """
        material = self.material_registry.find(material_tag)
        if material is None:
            self._warn_once("material", material_tag)
            return False

        prefix = self.uniform_names.material
        self.shader_uniforms.set_vec3(f"{prefix}.diffuseColor", material.diffuse_color)
        self.shader_uniforms.set_vec3(f"{prefix}.specularColor", material.specular_color)
        self.shader_uniforms.set_float(f"{prefix}.shininess", material.shininess)
        return True

    def _warn_once(self, kind, tag):
        if (kind, tag) in self._warned_tags:
            return
        self._warned_tags.add((kind, tag))
        logger.warning("[SceneComposer] No %s registered under tag '%s'", kind, tag)

    # --------------------------------------------------------------------------
    # Cleanup
    # --------------------------------------------------------------------------
    def shutdown(self):
        """
        Release textures and mesh buffers. Must run before the GL context is destroyed.
        """
        self.texture_registry.release_all()
        self.mesh_library.release_all()
        self.prepared = False
