import logging

from components.scene_config import MAX_POINT_LIGHTS, UniformNames

logger = logging.getLogger(__name__)


class LightConfigurator:
    """
    Pushes the scene's fixed lighting setup to the shader.

    Lighting is static: configure() is called once before the first frame and
    the uniforms it sets are never touched again.
    """

    def __init__(self, shader_uniforms, uniform_names=None):
        self.shader_uniforms = shader_uniforms
        self.uniform_names = uniform_names or UniformNames()

    def configure(self, directional_light, point_lights):
        """
        Enable lighting and set the directional light plus up to four point lights.

        Point light slots without a light are marked inactive.

        Args:
            directional_light (DirectionalLight or None): The scene's directional light.
            point_lights (sequence of PointLight): At most MAX_POINT_LIGHTS lights.

        Raises:
            ValueError: If more than MAX_POINT_LIGHTS point lights are given.
        """
        if len(point_lights) > MAX_POINT_LIGHTS:
            raise ValueError(
                f"Invalid point light count {len(point_lights)}. At most {MAX_POINT_LIGHTS} are supported."
            )

        self.shader_uniforms.set_bool(self.uniform_names.use_lighting, True)

        if directional_light is not None:
            self.set_directional_light(directional_light)

        for index in range(MAX_POINT_LIGHTS):
            if index < len(point_lights):
                self.set_point_light(index, point_lights[index])
            else:
                self.shader_uniforms.set_bool(f"{self.uniform_names.point_lights}[{index}].bActive", False)

        logger.debug(
            "[LightConfigurator] Configured %s directional light and %d point lights",
            "a" if directional_light is not None else "no",
            len(point_lights),
        )

    def set_directional_light(self, light):
        prefix = self.uniform_names.directional_light
        self.shader_uniforms.set_vec3(f"{prefix}.direction", light.direction)
        self.shader_uniforms.set_vec3(f"{prefix}.ambient", light.ambient)
        self.shader_uniforms.set_vec3(f"{prefix}.diffuse", light.diffuse)
        self.shader_uniforms.set_vec3(f"{prefix}.specular", light.specular)
        self.shader_uniforms.set_bool(f"{prefix}.bActive", light.active)

    def set_point_light(self, index, light):
        prefix = f"{self.uniform_names.point_lights}[{index}]"
        self.shader_uniforms.set_vec3(f"{prefix}.position", light.position)
        self.shader_uniforms.set_vec3(f"{prefix}.ambient", light.ambient)
        self.shader_uniforms.set_vec3(f"{prefix}.diffuse", light.diffuse)
        self.shader_uniforms.set_vec3(f"{prefix}.specular", light.specular)
        self.shader_uniforms.set_float(f"{prefix}.constant", light.constant)
        self.shader_uniforms.set_float(f"{prefix}.linear", light.linear)
        self.shader_uniforms.set_float(f"{prefix}.quadratic", light.quadratic)
        self.shader_uniforms.set_bool(f"{prefix}.bActive", light.active)
