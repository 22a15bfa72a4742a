from dataclasses import dataclass
from pathlib import Path

from astouml.core.lexer import scan
from astouml.core.model_builder import build_diagram_model
from astouml.core.ports.observer import ScanObserver
from astouml.core.renderer import render
from astouml.models import DiagramModel, Token

OUTPUT_SUFFIX = ".puml"


@dataclass(frozen=True)
class PipelineResult:
    tokens: list[Token]
    model: DiagramModel
    diagram: str


def run_pipeline(source_text: str, observer: ScanObserver | None = None) -> PipelineResult:
    """Scan source text, build its class model and render the diagram."""
    tokens = scan(source_text, observer)
    model = build_diagram_model(tokens)
    return PipelineResult(tokens=tokens, model=model, diagram=render(model))


def output_path_for(path: str | Path) -> Path:
    """Replace the final extension of ``path`` with ``.puml``."""
    return Path(path).with_suffix(OUTPUT_SUFFIX)
