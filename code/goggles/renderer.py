# code/goggles/renderer.py
from pathlib import Path
from typing import Any, Mapping, Optional, Union
import logging

from jinja2 import Environment, FileSystemLoader, StrictUndefined

import global_config
from .context import ReportContext

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())  # Evite msg si non configuré


def _environment(loader=None) -> Environment:
    # Rendu texte (markdown): pas d'échappement HTML. Nom inconnu -> UndefinedError.
    return Environment(loader=loader,
                       undefined=StrictUndefined,
                       autoescape=False,
                       keep_trailing_newline=False)


def render_string(source: str, bindings: Mapping[str, Any]) -> str:
    """Rend un template en mémoire avec un mapping explicite de valeurs nommées."""
    return _environment().from_string(source).render(dict(bindings))


def render(context: ReportContext,
           template_dir: Optional[Union[str, Path]] = None,
           template_name: Optional[str] = None) -> str:
    """
    Rend le rapport complet pour `context`.

    Un template absent (TemplateNotFound) ou une variable inconnue
    (UndefinedError) remonte tel quel à l'appelant.
    """
    template_dir = Path(template_dir) if template_dir is not None else global_config.TEMPLATES_DIR
    template_name = template_name or global_config.TEMPLATE_NAME
    logger.info(f"Rendu du template '{template_name}' depuis '{template_dir}'")
    env = _environment(FileSystemLoader(str(template_dir), encoding='utf-8'))
    template = env.get_template(template_name)
    report = template.render(context.as_bindings())
    logger.debug(f"Rapport rendu ({len(report)} caractères).")
    return report
