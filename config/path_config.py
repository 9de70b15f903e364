import os

# ------------------------------------------------------------------------------
# Base Directory Setup
# ------------------------------------------------------------------------------
current_dir = os.path.dirname(os.path.realpath(__file__))


def get_path(*path_parts):
    """
    Build an absolute path by joining the current config directory with the given parts.

    Args:
        *path_parts: Variable length path segments.

    Returns:
        str: The absolute path.
    """
    return os.path.join(current_dir, *path_parts)


# ------------------------------------------------------------------------------
# Repository Directories
# ------------------------------------------------------------------------------
components_dir = get_path("..", "components")
scenes_dir = get_path("..", "scenes")
textures_dir = get_path("..", "textures")
utils_dir = get_path("..", "utils")

config_dir = current_dir
