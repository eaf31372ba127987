"""Default shader programs for meshes and lines, compiled once and cached."""

from __future__ import annotations

import enum
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, Union

logger = logging.getLogger(__name__)

Compiler = Callable[[str, str, str], int]
Releaser = Callable[[int], None]
AttributeCount = Union[int, Sequence]

MESH_SHADER = """\
#version 330

#ifdef VERTEX_SHADER
    layout(location= 0) in vec3 position;
    uniform mat4 mvpMatrix;
    uniform mat4 mvMatrix;
    out vec3 vertex_position;

    #ifdef USE_TEXCOORD
        layout(location= 1) in vec2 texcoord;
        out vec2 vertex_texcoord;
    #endif

    #ifdef USE_NORMAL
        layout(location= 2) in vec3 normal;
        uniform mat4 normalMatrix;
        out vec3 vertex_normal;
    #endif

    void main( )
    {
        gl_Position= mvpMatrix * vec4(position, 1);
    #ifdef USE_TEXCOORD
        vertex_texcoord= texcoord;
    #endif
    #ifdef USE_NORMAL
        vertex_normal= mat3(normalMatrix) * normal;
    #endif
        vertex_position= vec3(mvMatrix * vec4(position, 1));
    }
#endif

#ifdef FRAGMENT_SHADER
    #ifdef USE_TEXCOORD
        in vec2 vertex_texcoord;
        uniform sampler2D diffuse_color;
    #endif

    #ifdef USE_NORMAL
        in vec3 vertex_normal;
    #endif

    in vec3 vertex_position;
    uniform vec4 mesh_color= vec4(1, 1, 1, 1);
    out vec4 fragment_color;

    void main( )
    {
        vec4 color= mesh_color;
    #ifdef USE_TEXCOORD
        color= color * texture(diffuse_color, vertex_texcoord);
    #endif
    #ifdef USE_NORMAL
        vec3 normal= vertex_normal;
    #else
        vec3 t= normalize(dFdx(vertex_position));
        vec3 b= normalize(dFdy(vertex_position));
        vec3 normal= cross(t, b);
    #endif
        float cos_theta= abs(dot(normalize(normal), normalize(-vertex_position)));
        color.rgb= color.rgb * cos_theta;
        fragment_color= color;
    }
#endif
"""

LINE_SHADER = """\
#version 330

#ifdef VERTEX_SHADER
    layout(location= 0) in vec3 position;
    uniform mat4 mvpMatrix;

    void main( )
    {
        gl_Position= mvpMatrix * vec4(position, 1);
    }
#endif

#ifdef FRAGMENT_SHADER
    uniform vec4 line_color= vec4(1, 1, 1, 1);
    out vec4 fragment_color;

    void main( )
    {
        fragment_color= line_color;
    }
#endif
"""

USE_TEXCOORD = "#define USE_TEXCOORD\n"
USE_NORMAL = "#define USE_NORMAL\n"


class Primitive(enum.Enum):
    """Kinds of primitives a program may draw."""

    POINTS = "points"
    LINES = "lines"
    LINE_STRIP = "line_strip"
    TRIANGLES = "triangles"


@dataclass(frozen=True)
class PipelineProgram:
    """A compiled shader program and what it was built from."""

    name: str
    source: str
    definitions: str
    program: int


def _counting_compiler() -> Compiler:
    counter = itertools.count(1)

    def compile_program(name: str, source: str, definitions: str) -> int:
        return next(counter)

    return compile_program


@dataclass
class PipelineCache:
    """Set of compiled programs, looked up by name and definitions."""

    compile: Compiler = field(default_factory=_counting_compiler)
    release_program: Optional[Releaser] = None
    programs: list[PipelineProgram] = field(default_factory=list)

    def find(self, name: str, source: str, definitions: str = "") -> PipelineProgram:
        """Return the cached program, compiling it on first use."""
        for program in self.programs:
            if program.name == name and program.definitions == definitions:
                return program
        handle = self.compile(name, source, definitions)
        program = PipelineProgram(name, source, definitions, handle)
        self.programs.append(program)
        return program

    def release(self) -> None:
        """Release every cached program and empty the cache."""
        logger.info("[pipeline cache] %u programs.", len(self.programs))
        if self.release_program is not None:
            for program in self.programs:
                self.release_program(program.program)
        self.programs.clear()


def _count(value: AttributeCount) -> int:
    return value if isinstance(value, int) else len(value)


def shader_definitions(
    positions: AttributeCount,
    texcoords: AttributeCount = 0,
    normals: AttributeCount = 0,
) -> str:
    """Preprocessor definitions enabling the attributes that match the positions."""
    n_positions = _count(positions)
    if n_positions <= 0:
        raise ValueError("a default program needs positions")
    n_texcoords, n_normals = _count(texcoords), _count(normals)
    definitions = ""
    if n_texcoords > 0 and n_texcoords == n_positions:
        definitions += USE_TEXCOORD
    if n_normals > 0 and n_normals == n_positions:
        definitions += USE_NORMAL
    return definitions


def create_default_program(
    cache: PipelineCache,
    primitives: Primitive,
    positions: AttributeCount,
    texcoords: AttributeCount = 0,
    normals: AttributeCount = 0,
) -> int:
    """Handle of the default program for the primitives and attributes."""
    definitions = shader_definitions(positions, texcoords, normals)
    if primitives is Primitive.TRIANGLES:
        program = cache.find("mesh", MESH_SHADER, definitions)
    else:
        program = cache.find("line", LINE_SHADER, definitions)
    return program.program


def program_for_attributes(
    cache: PipelineCache,
    primitives: Primitive,
    has_positions: bool,
    has_texcoords: bool,
    has_normals: bool,
) -> int:
    """Default program for a vertex array, given which attributes it carries."""
    return create_default_program(
        cache,
        primitives,
        1 if has_positions else 0,
        1 if has_texcoords else 0,
        1 if has_normals else 0,
    )