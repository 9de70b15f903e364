from OpenGL.GL import *


def check_gl_error(context: str, debug_mode: bool):
    """
    Check for OpenGL errors if debug_mode is enabled.

    :param context: A string indicating where in the code the check occurs.
    :param debug_mode: If True, any OpenGL error raises a RuntimeError.
    """
    if debug_mode:
        gl_error = glGetError()
        if gl_error != GL_NO_ERROR:
            raise RuntimeError(f"OpenGL error in {context}: {gl_error}")
