from astouml.models import ClassModel, DiagramModel

HEADER = "@startuml"
FOOTER = "@enduml"
INDENT = "    "


def _render_class(cls: ClassModel) -> str:
    lines = [f"class {cls.name} {{"]
    lines.extend(f"{INDENT}{attribute}" for attribute in cls.attributes)
    lines.extend(f"{INDENT}{method}" for method in cls.methods)
    lines.append("}")
    return "\n".join(lines)


def render(model: DiagramModel) -> str:
    """Render a diagram model as PlantUML text.

    Names and member lines are emitted verbatim; nothing is escaped.
    """
    sections = [HEADER]
    if model.classes:
        sections.append("\n\n".join(_render_class(cls) for cls in model.classes))
    if model.associations:
        sections.append("\n".join(f"{INDENT}{association}" for association in model.associations))
    sections.append(FOOTER)
    return "\n\n".join(sections) + "\n"
