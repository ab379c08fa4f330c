import pytest

from shadowdemo.shader import Shader, ShaderError, ShaderType, read_source

VERTEX = "#version 330 core\nvoid main() { gl_Position = vec4(0.0); }\n"
FRAGMENT = "#version 330 core\nvoid main() {}\n"


def test_read_source_returns_file_text(tmp_path):
    path = tmp_path / "depth.vts"
    path.write_text(VERTEX)
    assert read_source(path) == VERTEX


def test_read_source_accepts_string_path(tmp_path):
    path = tmp_path / "depth.frs"
    path.write_text(FRAGMENT)
    assert read_source(str(path)) == FRAGMENT


def test_read_source_missing_file_raises(tmp_path):
    with pytest.raises(ShaderError, match="FILE_NOT_SUCCESSSFULLY_READ"):
        read_source(tmp_path / "missing.vts")


def test_shader_missing_vertex_file_raises(tmp_path):
    fragment = tmp_path / "ok.frs"
    fragment.write_text(FRAGMENT)
    with pytest.raises(ShaderError, match="missing.vts"):
        Shader(tmp_path / "missing.vts", fragment)


def test_shader_missing_fragment_file_raises(tmp_path):
    vertex = tmp_path / "ok.vts"
    vertex.write_text(VERTEX)
    with pytest.raises(ShaderError, match="missing.frs"):
        Shader(vertex, tmp_path / "missing.frs")


def test_shader_missing_geometry_file_raises(tmp_path):
    vertex = tmp_path / "ok.vts"
    vertex.write_text(VERTEX)
    fragment = tmp_path / "ok.frs"
    fragment.write_text(FRAGMENT)
    with pytest.raises(ShaderError, match="missing.gs"):
        Shader(vertex, fragment, tmp_path / "missing.gs")


@pytest.mark.parametrize("name", ["vertex", "fragment", "geometry"])
def test_shader_type_lookup_by_stage_name(name):
    assert ShaderType(name).value == name