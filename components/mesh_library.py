import ctypes
import logging
from abc import ABC, abstractmethod
from enum import Enum

import numpy as np
from OpenGL.GL import *

logger = logging.getLogger(__name__)


class MeshKind(Enum):
    """The fixed set of procedural shapes a scene can draw."""

    PLANE = "plane"
    SPHERE = "sphere"
    CYLINDER = "cylinder"
    BOX = "box"
    CONE = "cone"
    PRISM = "prism"
    PYRAMID4 = "pyramid4"
    TAPERED_CYLINDER = "tapered_cylinder"


class MeshData:
    """
    Tessellated geometry for one mesh kind.

    Vertices are interleaved float32: position(3), normal(3), texCoords(2).
    Indices are optional; without them the vertices are drawn as a plain
    triangle list.
    """

    FLOATS_PER_VERTEX = 8

    def __init__(self, vertices, indices=None):
        self.vertices = np.asarray(vertices, dtype=np.float32).reshape(-1)
        self.indices = None if indices is None else np.asarray(indices, dtype=np.uint32).reshape(-1)
        if self.vertices.size % self.FLOATS_PER_VERTEX != 0:
            raise ValueError(
                f"Invalid vertex data: {self.vertices.size} floats is not a multiple of {self.FLOATS_PER_VERTEX}."
            )

    @property
    def vertex_count(self):
        return self.vertices.size // self.FLOATS_PER_VERTEX


class MeshLibrary(ABC):
    """
    MeshLibrary keeps one GPU-resident copy of each mesh kind and draws it on request.
    """

    @abstractmethod
    def load_mesh(self, kind: MeshKind):
        """Upload the geometry for `kind` so it can be drawn."""
        pass

    @abstractmethod
    def draw_mesh(self, kind: MeshKind):
        """Issue the draw call for a previously loaded mesh kind."""
        pass

    @abstractmethod
    def release_all(self):
        """Free every GPU buffer held by the library."""
        pass


class GLMeshLibrary(MeshLibrary):
    """
    MeshLibrary backed by one VAO/VBO (and optional EBO) per mesh kind.

    The geometry itself is supplied by the caller as a mapping of MeshKind -> MeshData.
    """

    POSITION_LOCATION = 0
    NORMAL_LOCATION = 1
    TEX_COORDS_LOCATION = 2

    def __init__(self, mesh_data):
        self.mesh_data = dict(mesh_data)
        self.vaos = {}
        self.vbos = {}
        self.ebos = {}

    def is_loaded(self, kind):
        return kind in self.vaos

    # --------------------------------------------------------------------------
    # Loading
    # --------------------------------------------------------------------------
    def load_mesh(self, kind):
        """
        Upload the geometry for `kind`. Loading an already loaded kind does nothing.

        Raises:
            ValueError: If no geometry was supplied for `kind`.
        """
        if self.is_loaded(kind):
            return
        if kind not in self.mesh_data:
            raise ValueError(f"Invalid mesh kind: no geometry supplied for '{kind.value}'.")

        mesh = self.mesh_data[kind]

        vao = glGenVertexArrays(1)
        glBindVertexArray(vao)

        vbo = glGenBuffers(1)
        glBindBuffer(GL_ARRAY_BUFFER, vbo)
        glBufferData(GL_ARRAY_BUFFER, mesh.vertices.nbytes, mesh.vertices, GL_STATIC_DRAW)

        ebo = None
        if mesh.indices is not None:
            ebo = glGenBuffers(1)
            glBindBuffer(GL_ELEMENT_ARRAY_BUFFER, ebo)
            glBufferData(GL_ELEMENT_ARRAY_BUFFER, mesh.indices.nbytes, mesh.indices, GL_STATIC_DRAW)

        self._setup_vertex_attributes()
        glBindVertexArray(0)

        self.vaos[kind] = vao
        self.vbos[kind] = vbo
        self.ebos[kind] = ebo
        logger.debug("[GLMeshLibrary] Loaded %s mesh (%d vertices)", kind.value, mesh.vertex_count)

    def _setup_vertex_attributes(self):
        """
        Configure the vertex attribute pointers for position, normal and texCoords.
        """
        float_size = 4
        vertex_stride = MeshData.FLOATS_PER_VERTEX * float_size

        # position -> offset 0
        glEnableVertexAttribArray(self.POSITION_LOCATION)
        glVertexAttribPointer(self.POSITION_LOCATION, 3, GL_FLOAT, GL_FALSE, vertex_stride, ctypes.c_void_p(0))

        # normal -> offset 3 floats
        glEnableVertexAttribArray(self.NORMAL_LOCATION)
        glVertexAttribPointer(
            self.NORMAL_LOCATION, 3, GL_FLOAT, GL_FALSE, vertex_stride, ctypes.c_void_p(3 * float_size)
        )

        # texCoords -> offset 6 floats
        glEnableVertexAttribArray(self.TEX_COORDS_LOCATION)
        glVertexAttribPointer(
            self.TEX_COORDS_LOCATION, 2, GL_FLOAT, GL_FALSE, vertex_stride, ctypes.c_void_p(6 * float_size)
        )

    # --------------------------------------------------------------------------
    # Drawing
    # --------------------------------------------------------------------------
    def draw_mesh(self, kind):
        """
        Draw a loaded mesh with the currently bound program and uniforms.

        Raises:
            RuntimeError: If `kind` was never loaded.
        """
        if not self.is_loaded(kind):
            raise RuntimeError(f"Mesh '{kind.value}' must be loaded before it can be drawn.")

        mesh = self.mesh_data[kind]
        glBindVertexArray(self.vaos[kind])
        if mesh.indices is not None:
            glDrawElements(GL_TRIANGLES, mesh.indices.size, GL_UNSIGNED_INT, None)
        else:
            glDrawArrays(GL_TRIANGLES, 0, mesh.vertex_count)
        glBindVertexArray(0)

    # --------------------------------------------------------------------------
    # Cleanup
    # --------------------------------------------------------------------------
    def release_all(self):
        """
        Delete all VAOs, VBOs and EBOs created by load_mesh().
        """
        if self.vaos:
            glDeleteVertexArrays(len(self.vaos), list(self.vaos.values()))
        if self.vbos:
            glDeleteBuffers(len(self.vbos), list(self.vbos.values()))
        ebos = [ebo for ebo in self.ebos.values() if ebo is not None]
        if ebos:
            glDeleteBuffers(len(ebos), ebos)
        self.vaos.clear()
        self.vbos.clear()
        self.ebos.clear()
