import glm
from OpenGL.GL import *


class ShaderUniforms:
    """
    ShaderUniforms sets named uniforms on an already linked shader program.

    Compiling and linking the program is left to the host; this class only
    looks up uniform locations (cached per name) and writes typed values.
    Vector setters accept plain tuples as well as glm vectors.
    """

    def __init__(self, shader_program):
        """
        Args:
            shader_program (int): Handle of a linked OpenGL program.
        """
        self.shader_program = shader_program
        self._locations = {}

    # --------------------------------------------------------------------------
    # Program
    # --------------------------------------------------------------------------
    def use_shader_program(self):
        """Activate the wrapped shader program."""
        if self.shader_program:
            glUseProgram(self.shader_program)

    def get_location(self, name):
        """
        Return the uniform location for `name`, querying GL only once per name.

        A location of -1 means the uniform is not active in the program; GL
        silently ignores writes to it.
        """
        if name not in self._locations:
            self._locations[name] = glGetUniformLocation(self.shader_program, name)
        return self._locations[name]

    # --------------------------------------------------------------------------
    # Scalars
    # --------------------------------------------------------------------------
    def set_bool(self, name, value):
        glUniform1i(self.get_location(name), int(bool(value)))

    def set_int(self, name, value):
        glUniform1i(self.get_location(name), int(value))

    def set_float(self, name, value):
        glUniform1f(self.get_location(name), float(value))

    def set_sampler2d(self, name, texture_unit):
        """Point a sampler2D uniform at a texture unit index."""
        glUniform1i(self.get_location(name), int(texture_unit))

    # --------------------------------------------------------------------------
    # Vectors & Matrices
    # --------------------------------------------------------------------------
    def set_vec2(self, name, value):
        glUniform2fv(self.get_location(name), 1, glm.value_ptr(glm.vec2(*value)))

    def set_vec3(self, name, value):
        glUniform3fv(self.get_location(name), 1, glm.value_ptr(glm.vec3(*value)))

    def set_vec4(self, name, value):
        glUniform4fv(self.get_location(name), 1, glm.value_ptr(glm.vec4(*value)))

    def set_mat4(self, name, matrix):
        glUniformMatrix4fv(self.get_location(name), 1, GL_FALSE, glm.value_ptr(matrix))
