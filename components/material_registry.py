from dataclasses import dataclass
from typing import Optional, Tuple

RGB = Tuple[float, float, float]


@dataclass(frozen=True)
class Material:
    tag: str
    diffuse_color: RGB
    specular_color: RGB
    shininess: float


class MaterialRegistry:
    """
    Append-only list of named materials.

    Tags are not deduplicated; find() returns the first material defined
    under a tag, so later duplicates are shadowed.
    """

    def __init__(self):
        self._materials = []

    def __len__(self):
        return len(self._materials)

    @property
    def tags(self):
        return [material.tag for material in self._materials]

    def define(self, tag, diffuse, specular, shininess):
        """
        Add a material and return the stored record.

        Args:
            tag (str): Material name.
            diffuse (tuple): Diffuse RGB color.
            specular (tuple): Specular RGB color.
            shininess (float): Specular exponent.
        """
        material = Material(
            tag=tag,
            diffuse_color=tuple(float(c) for c in diffuse),
            specular_color=tuple(float(c) for c in specular),
            shininess=float(shininess),
        )
        self._materials.append(material)
        return material

    def define_all(self, materials):
        for material in materials:
            self.define(material.tag, material.diffuse_color, material.specular_color, material.shininess)

    def find(self, tag) -> Optional[Material]:
        """Return the first material tagged `tag`, or None if there is none."""
        for material in self._materials:
            if material.tag == tag:
                return material
        return None
