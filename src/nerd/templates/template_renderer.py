"""Load and render the Jinja2 templates bundled with a package."""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Render a bundled Jinja2 template with the given variables.

    Args:
        template_name: Template filename (e.g. "CMakeLists.txt.j2")
        package: Package whose ``templates`` subpackage holds the file
            (callers pass __package__).
        **kwargs: Template variables. Referencing a variable that was not
            passed is an error.

    Returns:
        The rendered text, without the template's final newline.

    Raises:
        FileNotFoundError: If the template does not exist.
    """
    templates = importlib.resources.files(f"{package}.templates")
    source = templates.joinpath(template_name)
    if not source.is_file():
        raise FileNotFoundError(f"Template not found: {template_name}")
    template = jinja2.Template(source.read_text(encoding="utf-8"), undefined=jinja2.StrictUndefined)
    return template.render(**kwargs)
