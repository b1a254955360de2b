# code/goggles/config_loader.py
from pathlib import Path
import logging
from typing import Dict, Any, Optional
import yaml

import global_config

logger = logging.getLogger(__name__)

DEFAULT_TOOLS_CONFIG: Dict[str, Any] = {
    "locator_command": ["bundle", "show"],
    "loc_command": ["cloc", "--md"],
}

_config_cache: Optional[Dict[str, Any]] = None


def _validated(config_from_file: Dict[str, Any], config_path: Path) -> Dict[str, Any]:
    """Ne garde que les commandes valides (liste non vide de chaînes)."""
    merged = dict(DEFAULT_TOOLS_CONFIG)
    for key, value in config_from_file.items():
        if key not in DEFAULT_TOOLS_CONFIG:
            logger.warning(f"Clé inconnue '{key}' ignorée dans '{config_path}'.")
            continue
        if not isinstance(value, list) or not value or not all(isinstance(v, str) for v in value):
            logger.error(
                f"Valeur invalide pour '{key}' dans '{config_path}' (liste de chaînes attendue). "
                f"Utilisation du défaut {DEFAULT_TOOLS_CONFIG[key]}."
            )
            continue
        merged[key] = list(value)
    return merged


def get_tools_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Charge et retourne la configuration des outils externes, avec mise en cache."""
    global _config_cache
    if config_path is None and _config_cache is not None:
        return _config_cache

    path = Path(config_path) if config_path is not None else global_config.TOOLS_CONFIG_PATH

    if not path.is_file():
        logger.warning(
            f"Fichier de configuration YAML des outils introuvable à '{path}'. "
            f"Utilisation de la configuration par défaut."
        )
        config = dict(DEFAULT_TOOLS_CONFIG)
    else:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                config_from_file = yaml.safe_load(f)
            if isinstance(config_from_file, dict):
                config = _validated(config_from_file, path)
                logger.info(f"Configuration des outils chargée depuis '{path}'.")
            else:
                logger.error(
                    f"Le contenu du fichier YAML '{path}' n'est pas un dictionnaire valide. "
                    "Utilisation de la configuration par défaut."
                )
                config = dict(DEFAULT_TOOLS_CONFIG)
        except yaml.YAMLError as e_yaml:
            logger.error(
                f"Erreur lors du parsing YAML de la configuration des outils depuis '{path}': {e_yaml}. "
                f"Utilisation de la configuration par défaut.", exc_info=True
            )
            config = dict(DEFAULT_TOOLS_CONFIG)

    logger.debug(f"Configuration des outils effective: {config}")
    if config_path is None:
        _config_cache = config
    return config


def clear_cache():
    global _config_cache
    _config_cache = None
