import logging
from dataclasses import dataclass

import numpy as np
from OpenGL.GL import *
from PIL import Image

logger = logging.getLogger(__name__)

# Returned by find_id() / find_slot() when no texture carries the requested tag.
NOT_FOUND = -1

DEFAULT_TEXTURE_UNIT_LIMIT = 16


@dataclass(frozen=True)
class TextureEntry:
    texture_id: int
    tag: str


class TextureRegistry:
    """
    Loads image files into GPU textures and keeps them in registration order.

    The position of an entry in the registry is also its texture unit slot:
    the first registered texture is bound to GL_TEXTURE0, the second to
    GL_TEXTURE1, and so on. Lookups are linear scans where the first matching
    tag wins.
    """

    def __init__(self, texture_unit_limit=DEFAULT_TEXTURE_UNIT_LIMIT, flip_vertically=True):
        """
        Args:
            texture_unit_limit (int): Maximum number of textures (one per texture unit).
            flip_vertically (bool): Flip images on load so row 0 is the bottom row, as GL expects.
        """
        self.texture_unit_limit = texture_unit_limit
        self.flip_vertically = flip_vertically
        self._entries = []

    def __len__(self):
        return len(self._entries)

    @property
    def entries(self):
        return tuple(self._entries)

    @property
    def tags(self):
        return [entry.tag for entry in self._entries]

    # --------------------------------------------------------------------------
    # Loading
    # --------------------------------------------------------------------------
    def load(self, path, tag):
        """
        Decode an image file, upload it as a mipmapped 2D texture and register it under `tag`.

        RGB, RGBA and palette images are supported; palettes are expanded. Failures
        are logged and reported through the return value; nothing is allocated
        on the GPU for a texture that fails to load.

        Args:
            path (str): Image file path.
            tag (str): Identifier used to look the texture up later.

        Returns:
            bool: True if the texture was registered.
        """
        if len(self._entries) >= self.texture_unit_limit:
            logger.warning(
                "[TextureRegistry] All %d texture units are in use, skipping '%s' (%s)",
                self.texture_unit_limit,
                tag,
                path,
            )
            return False

        try:
            with Image.open(path) as image:
                image.load()
                width, height = image.size
                mode = self._upload_mode(image)
                if mode is None:
                    logger.warning(
                        "[TextureRegistry] Not implemented to handle image with %d channels: %s",
                        len(image.getbands()),
                        path,
                    )
                    return False
                pixels = self._decode_pixels(image, mode)
        except (OSError, ValueError) as e:
            logger.warning("[TextureRegistry] Could not load image: %s (%s)", path, e)
            return False

        channels = len(mode)
        if channels == 3:
            internal_format, pixel_format = GL_RGB8, GL_RGB
        else:
            internal_format, pixel_format = GL_RGBA8, GL_RGBA

        logger.info(
            "[TextureRegistry] Successfully loaded image: %s, width: %d, height: %d, channels: %d",
            path,
            width,
            height,
            channels,
        )

        texture_id = glGenTextures(1)
        try:
            glBindTexture(GL_TEXTURE_2D, texture_id)

            glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_REPEAT)
            glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_REPEAT)
            glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
            glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)

            # RGB rows are not 4-byte aligned for arbitrary widths
            glPixelStorei(GL_UNPACK_ALIGNMENT, 1)
            glTexImage2D(GL_TEXTURE_2D, 0, internal_format, width, height, 0, pixel_format, GL_UNSIGNED_BYTE, pixels)
            glGenerateMipmap(GL_TEXTURE_2D)
        except Exception:
            glDeleteTextures(1, [texture_id])
            raise
        finally:
            glBindTexture(GL_TEXTURE_2D, 0)

        self._entries.append(TextureEntry(texture_id=texture_id, tag=tag))
        return True

    @staticmethod
    def _upload_mode(image):
        """
        Return the Pillow mode the image is uploaded in ("RGB" or "RGBA"), or None if unsupported.

        Palette images are expanded: to RGBA when they carry transparency, otherwise to RGB.
        Grayscale images (1, L, LA) are not supported.
        """
        if image.mode == "P":
            return "RGBA" if "transparency" in image.info else "RGB"
        channels = len(image.getbands())
        if channels == 3:
            return "RGB"
        if channels == 4:
            return "RGBA"
        return None

    def _decode_pixels(self, image, mode):
        """
        Return the image as a contiguous uint8 array in `mode`, flipped if configured.
        """
        if image.mode != mode:
            image = image.convert(mode)
        if self.flip_vertically:
            image = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        return np.ascontiguousarray(np.asarray(image, dtype=np.uint8))

    def load_all(self, texture_paths):
        """
        Load every (tag, path) pair in order, continuing past failures.

        Returns:
            int: Number of textures registered.
        """
        loaded = 0
        for tag, path in texture_paths:
            if self.load(path, tag):
                loaded += 1
        if loaded < len(texture_paths):
            logger.warning("[TextureRegistry] Loaded %d of %d textures", loaded, len(texture_paths))
        return loaded

    # --------------------------------------------------------------------------
    # Binding & Lookup
    # --------------------------------------------------------------------------
    def bind_all(self):
        """
        Bind every registered texture to the texture unit matching its slot.
        """
        for slot, entry in enumerate(self._entries):
            glActiveTexture(GL_TEXTURE0 + slot)
            glBindTexture(GL_TEXTURE_2D, entry.texture_id)

    def find_id(self, tag):
        """Return the GL handle of the first texture tagged `tag`, or NOT_FOUND."""
        for entry in self._entries:
            if entry.tag == tag:
                return entry.texture_id
        return NOT_FOUND

    def find_slot(self, tag):
        """Return the texture unit slot of the first texture tagged `tag`, or NOT_FOUND."""
        for slot, entry in enumerate(self._entries):
            if entry.tag == tag:
                return slot
        return NOT_FOUND

    # --------------------------------------------------------------------------
    # Cleanup
    # --------------------------------------------------------------------------
    def release_all(self):
        """
        Delete every registered texture from GPU memory and empty the registry.
        """
        if self._entries:
            texture_ids = [entry.texture_id for entry in self._entries]
            glDeleteTextures(len(texture_ids), texture_ids)
            logger.debug("[TextureRegistry] Released %d textures", len(texture_ids))
        self._entries.clear()
