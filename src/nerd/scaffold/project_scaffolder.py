"""ProjectScaffolder: creates a CMake project and generates its build files."""

import os
from typing import Sequence

from nerd.console import Console
from nerd.errors import BuildConfigurationError, BuildToolMissingError, IoError, UsageError
from nerd.process_launcher import LAUNCH_ERROR, NOT_FOUND
from nerd.scaffold.project_directory import project_directory
from nerd.templates.template_renderer import render_template

DEFAULT_BUILD_TOOL = "cmake"
SOURCE_FILE = "main.cpp"
BUILD_DESCRIPTOR = "CMakeLists.txt"


class ProjectScaffolder:
    """Orchestrates project creation using an injected process launcher."""

    def __init__(self, launcher, build_tool: str = DEFAULT_BUILD_TOOL, console=None):
        self._launcher = launcher
        self._build_tool = build_tool
        self._console = console or Console()

    def start(self, params: Sequence[str]) -> str:
        """Scaffold the project named by the first parameter.

        Every step after the project directory exists runs inside the
        rollback guard, so any failure leaves nothing behind.
        """
        if not params:
            raise UsageError("Improper use. Proper use: nerd start <project_name>.")
        project_name = params[0]

        self._console.info("Generating project files...")
        with project_directory(project_name) as project_dir:
            source_dir = os.path.join(project_dir, "src")
            build_dir = os.path.join(project_dir, "build")
            self._write_project_files(project_name, project_dir, source_dir, build_dir)
            self._console.info("Project files generated successfully.")

            self._console.info("Generating build files...")
            self._generate_build_files(project_dir, build_dir)
            self._console.info("Build files generated successfully.")

        return f"Project '{project_name}' created successfully!"

    def _write_project_files(self, project_name, project_dir, source_dir, build_dir):
        try:
            source = render_template(f"{SOURCE_FILE}.j2", package=__package__)
            descriptor = render_template(f"{BUILD_DESCRIPTOR}.j2", package=__package__, project_name=project_name)
            os.mkdir(source_dir)
            os.mkdir(build_dir)
            _write_file(os.path.join(source_dir, SOURCE_FILE), source)
            _write_file(os.path.join(project_dir, BUILD_DESCRIPTOR), descriptor)
        except OSError as e:
            raise IoError(f"Failed to generate project files: {e}", e)

    def build_command(self, project_dir, build_dir):
        return [self._build_tool, "-S", project_dir, "-B", build_dir]

    def _generate_build_files(self, project_dir, build_dir):
        outcome = self._launcher.launch(self.build_command(project_dir, build_dir))
        if outcome.kind == NOT_FOUND:
            raise BuildToolMissingError(self._build_tool)
        if outcome.kind == LAUNCH_ERROR:
            raise IoError(f"Failed to generate build files: {outcome.error_message}")
        if not outcome.succeeded:
            raise BuildConfigurationError(outcome.stderr)


def _write_file(path, content):
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
