import glm


class TransformBuilder:
    """
    Builds the per-draw model matrix and pushes it to the shader.

    The composition order is fixed: scale first, then rotation about X, then
    Y, then Z, then translation, i.e. ``T * Rz * Ry * Rx * S``. Object
    placement in a scene depends on this exact order.
    """

    def __init__(self, shader_uniforms, model_uniform="model"):
        """
        Args:
            shader_uniforms (ShaderUniforms): Target for the model matrix.
            model_uniform (str): Name of the mat4 model uniform.
        """
        self.shader_uniforms = shader_uniforms
        self.model_uniform = model_uniform

    @staticmethod
    def compose(scale, rotation_degrees, position):
        """
        Compose scale, Euler rotation (degrees) and translation into one matrix.

        :param scale: (x, y, z) scale factors.
        :param rotation_degrees: (xDeg, yDeg, zDeg) rotation angles.
        :param position: (x, y, z) translation.
        :return: glm.mat4 equal to T * Rz * Ry * Rx * S.
        """
        x_deg, y_deg, z_deg = rotation_degrees

        model = glm.translate(glm.mat4(1.0), glm.vec3(*position))
        model = glm.rotate(model, glm.radians(z_deg), glm.vec3(0.0, 0.0, 1.0))
        model = glm.rotate(model, glm.radians(y_deg), glm.vec3(0.0, 1.0, 0.0))
        model = glm.rotate(model, glm.radians(x_deg), glm.vec3(1.0, 0.0, 0.0))
        model = glm.scale(model, glm.vec3(*scale))
        return model

    def apply(self, scale, rotation_degrees, position):
        """
        Compose the model matrix and set it on the shader for the next draw call.
        """
        model = self.compose(scale, rotation_degrees, position)
        self.shader_uniforms.set_mat4(self.model_uniform, model)
        return model
