"""
Design system du moteur de rendu.
Correspondances fixes valeur → classes CSS (utilitaires Tailwind du front).
Chaque table a une clé par défaut : une valeur inconnue retombe dessus.
"""
from typing import Mapping


def pick(mapping: Mapping[str, str], value, default: str) -> str:
    """mapping[value] si connu, sinon mapping[default]."""
    if isinstance(value, str) and value in mapping:
        return mapping[value]
    return mapping[default]


# ── Texte riche ─────────────────────────────────────────────────────────────

RICH_TEXT_CLASS = "prose prose-slate max-w-none dark:prose-invert"
PARAGRAPH_CLASS = "mb-4 last:mb-0"
QUOTE_CLASS = "mb-4 border-l-4 border-muted-foreground/30 pl-4 italic"
LINK_CLASS = "text-primary underline underline-offset-4 hover:text-primary/80"
CODE_CLASS = "rounded bg-muted px-1 py-0.5 font-mono text-sm"

DEFAULT_HEADING_TAG = "h2"
HEADING_CLASSES = {
    "h1": "mb-4 text-4xl font-bold tracking-tight",
    "h2": "mb-3 text-3xl font-semibold tracking-tight",
    "h3": "mb-3 text-2xl font-semibold",
    "h4": "mb-2 text-xl font-semibold",
    "h5": "mb-2 text-lg font-medium",
    "h6": "mb-2 text-base font-medium",
}

ORDERED_LIST_KINDS = frozenset({"number", "ordered"})
LIST_CLASSES = {
    "ol": "mb-4 list-decimal pl-6",
    "ul": "mb-4 list-disc pl-6",
}

# Attributs posés ensemble sur un lien « nouvel onglet »
NEW_TAB_TARGET = "_blank"
NEW_TAB_REL = "noopener noreferrer"
FALLBACK_HREF = "#"


# ── Bloc Content (colonnes) ─────────────────────────────────────────────────

CONTAINER_CLASS = "container mx-auto px-4"
COLUMN_CLASS = "content-column"
COLUMN_SLOTS = ("column-one", "column-two", "column-three")
GRID_CLASSES = {
    "1": "grid grid-cols-1",
    "2": "grid grid-cols-1 gap-8 md:grid-cols-2",
    "3": "grid grid-cols-1 gap-8 md:grid-cols-2 lg:grid-cols-3",
}


# ── Bloc Media ──────────────────────────────────────────────────────────────

DEFAULT_MEDIA_WIDTH = 1200
DEFAULT_MEDIA_HEIGHT = 800
FALLBACK_ALT = "Image"
MEDIA_SIZES = "(max-width: 768px) 100vw, (max-width: 1200px) 80vw, 1024px"

DEFAULT_POSITION = "center"
ALIGNMENT_CLASSES = {
    "left": "mr-auto",
    "center": "mx-auto",
    "right": "ml-auto",
}
CAPTION_ALIGN_CLASSES = {
    "left": "text-left",
    "center": "text-center",
    "right": "text-right",
}


# ── Bloc CallToAction ───────────────────────────────────────────────────────

DEFAULT_BACKGROUND = "default"
BACKGROUND_CLASSES = {
    "default": "bg-background",
    "muted": "bg-muted",
    "primary": "bg-primary text-primary-foreground",
    "secondary": "bg-secondary text-secondary-foreground",
    "accent": "bg-accent text-accent-foreground",
}

DEFAULT_BUTTON_VARIANT = "default"
BUTTON_CLASSES = {
    "default": "btn btn-primary btn-lg",
    "secondary": "btn btn-secondary btn-lg",
    "outline": "btn btn-outline btn-lg",
    "ghost": "btn btn-ghost btn-lg",
}
