# global_config.py
# Configuration Globale du Projet
import os
from pathlib import Path
from dotenv import load_dotenv

# --- Chemins Essentiels ---
PROJECT_ROOT_DIR = Path(__file__).resolve().parent
PACKAGE_DIR = PROJECT_ROOT_DIR / "goggles"

# --- Chargement du fichier .env (Fallback) ---
# Cherche un fichier .env à la racine du projet.
# override=False: les variables déjà présentes dans l'environnement système gardent la priorité.
# Rien n'est affiché ici: stdout est réservé au rapport.
DOTENV_PATH = PROJECT_ROOT_DIR / ".env"
dotenv_loaded = load_dotenv(dotenv_path=DOTENV_PATH, override=False)
# ------------------------------------------------

# --- Template du Rapport ---
DEFAULT_TEMPLATES_DIR = PACKAGE_DIR / "templates"
TEMPLATES_DIR = Path(os.getenv("GOGGLES_TEMPLATES_DIR", str(DEFAULT_TEMPLATES_DIR)))
TEMPLATE_NAME = os.getenv("GOGGLES_TEMPLATE_NAME", "CODE.md")

# --- Configuration des outils externes (bundle, cloc) ---
DEFAULT_TOOLS_CONFIG_PATH = PACKAGE_DIR / "config.yaml"
TOOLS_CONFIG_PATH = Path(os.getenv("GOGGLES_CONFIG_PATH", str(DEFAULT_TOOLS_CONFIG_PATH)))


def describe() -> dict:
    """Retourne un résumé de la configuration effective (pour les logs de debug)."""
    return {
        "project_root_dir": str(PROJECT_ROOT_DIR),
        "dotenv_path": str(DOTENV_PATH),
        "dotenv_loaded": dotenv_loaded,
        "templates_dir": str(TEMPLATES_DIR),
        "template_name": TEMPLATE_NAME,
        "tools_config_path": str(TOOLS_CONFIG_PATH),
    }
