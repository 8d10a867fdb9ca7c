from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_LANG = "en"

_DICTIONARIES: dict[str, dict[str, str]] = {
    "en": {
        "title": "User Dashboard",
        "search": "Search by name or email...",
        "next": "Next",
        "prev": "Previous",
        "loading": "Loading users...",
        "error": "Failed to load users. Please try again.",
        "retry": "Retry",
        "name": "Name",
        "email": "Email",
        "no_results": "No users found",
        "showing": "Showing",
        "of": "of",
        "page": "Page",
        "username": "Username",
        "phone": "Phone",
        "website": "Website",
        "company": "Company",
        "address": "Address",
        "online": "Online",
    },
    "fr": {
        "title": "Tableau de Bord",
        "search": "Rechercher par nom ou email...",
        "next": "Suivant",
        "prev": "Précédent",
        "loading": "Chargement des utilisateurs...",
        "error": "Échec du chargement des utilisateurs. Veuillez réessayer.",
        "retry": "Réessayer",
        "name": "Nom",
        "email": "Email",
        "no_results": "Aucun utilisateur trouvé",
        "showing": "Affichage",
        "of": "de",
        "page": "Page",
        "username": "Nom d'utilisateur",
        "phone": "Téléphone",
        "website": "Site web",
        "company": "Entreprise",
        "address": "Adresse",
        "online": "En ligne",
    },
}

SUPPORTED_LANGS = tuple(_DICTIONARIES)


def get_dictionary(lang: str | None) -> Mapping[str, str]:
    key = (lang or "").strip().lower()
    return MappingProxyType(_DICTIONARIES.get(key, _DICTIONARIES[DEFAULT_LANG]))


def resolve_lang(lang: str | None) -> str:
    key = (lang or "").strip().lower()
    return key if key in _DICTIONARIES else DEFAULT_LANG


def toggle_lang(lang: str | None) -> str:
    current = resolve_lang(lang)
    index = SUPPORTED_LANGS.index(current)
    return SUPPORTED_LANGS[(index + 1) % len(SUPPORTED_LANGS)]
