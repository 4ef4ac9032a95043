"""Tests for the bundled template renderer."""

import pytest

from nerd.templates.template_renderer import render_template

SCAFFOLD_PACKAGE = "nerd.scaffold"


@pytest.mark.unit
class TestRenderTemplate:

    def test_renders_project_name_into_descriptor(self):
        result = render_template("CMakeLists.txt.j2", package=SCAFFOLD_PACKAGE, project_name="rocket")
        assert "project(rocket VERSION 0.1)" in result

    def test_leaves_cmake_variables_alone(self):
        result = render_template("CMakeLists.txt.j2", package=SCAFFOLD_PACKAGE, project_name="rocket")
        assert "add_executable(${PROJECT_NAME} src/main.cpp)" in result

    def test_drops_final_newline(self):
        result = render_template("main.cpp.j2", package=SCAFFOLD_PACKAGE)
        assert result.endswith("}")

    def test_missing_variable_raises(self):
        import jinja2

        with pytest.raises(jinja2.UndefinedError):
            render_template("CMakeLists.txt.j2", package=SCAFFOLD_PACKAGE)

    def test_missing_template_raises_error(self):
        with pytest.raises(FileNotFoundError, match="nonexistent.j2"):
            render_template("nonexistent.j2", package=SCAFFOLD_PACKAGE)
