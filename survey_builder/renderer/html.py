"""
Renderer HTML — un contrôle par bloc, dans l'ordre de la BlockList.
`data-index` porte l'index utilisé par le contrôleur de drag.
"""
from html import escape
from typing import Sequence

from ..core.schemas import BlockVariant, CHOICE_VARIANTS, INPUT_VARIANTS, REQUIRED_NOT_ASKED
from ..blocks.base import Block
from .. import config


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_form(blocks: Sequence[Block], title: str | None = None, lang: str | None = None) -> str:
    """Génère la page HTML complète de l'aperçu du formulaire."""
    title = title or config.FORM_TITLE
    inner = "\n".join(render_block(b, i) for i, b in enumerate(blocks))
    return f"""<!DOCTYPE html>
<html lang="{escape(lang or config.FORM_LANG)}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape(title)}</title>
</head>
<body>
<h1>{escape(title)}</h1>
<div class="block-card">
{inner}
</div>
</body>
</html>"""


# ── Blocs ───────────────────────────────────────────────────────────────────

def render_block(block: Block, index: int) -> str:
    """Rend un bloc selon sa variante."""
    variant = block.variant
    css     = f"draggable-block {variant.value.replace('_', '-')}-block"
    name    = escape(block.name)

    if variant == BlockVariant.TITLE:
        body = f'<label class="formname-label">{name}</label>'
    elif variant == BlockVariant.BUTTON:
        body = f'<div class="button-wrapper"><button>{name}</button></div>'
    else:
        asked = block.required and variant not in REQUIRED_NOT_ASKED
        star  = '<span class="required-star">*</span>' if asked else ""
        body = f"<p>{name}{star}</p>\n  {_render_control(block, index)}"

    return f'<div class="{css}" data-index="{index}" draggable="true">\n  {body}\n</div>'


def _render_control(block: Block, index: int) -> str:
    variant = block.variant
    if variant in CHOICE_VARIANTS:
        return _render_choices(block, index)
    if variant == BlockVariant.DROPDOWN:
        opts = "".join(f"<option>{escape(o)}</option>" for o in block.options)
        return f"<div><select>{opts}</select></div>"

    required = " required" if block.required else ""
    kind     = variant.value
    if variant in INPUT_VARIANTS:
        return f'<input type="{kind}" placeholder="Enter {kind} here"{required}>'
    return f'<textarea placeholder="Enter {kind} here"{required}></textarea>'


def _render_choices(block: Block, index: int) -> str:
    is_checkbox = block.variant == BlockVariant.CHECKBOX_GROUP
    kind        = "checkbox" if is_checkbox else "radio"
    items = "".join(
        f'<div class="option-item">'
        f'<input type="{kind}" id="button_{index}_{i}" name="button_{index}">'
        f'<label for="button_{index}_{i}">{escape(label)}</label>'
        f"</div>"
        for i, label in enumerate(block.choice_labels)
    )
    return f'<div class="option-row {kind}-row">{items}</div>'
