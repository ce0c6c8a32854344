"""
Lightweight SVG clean-up for icons exported by Figma.

 - Drop the XML declaration, doctype and comments
 - Collapse whitespace between tags
 - Replace fill/stroke colors with currentColor (unless colors are preserved),
   leaving gradient references and mask contents alone
 - Size the root element in em so icons follow the surrounding font size
"""

import re

XML_DECLARATION_RE = re.compile(r'<\?xml[^>]*\?>')
DOCTYPE_RE = re.compile(r'<!DOCTYPE[^>]*>', re.IGNORECASE)
COMMENT_RE = re.compile(r'<!--.*?-->', re.DOTALL)
WHITESPACE_BETWEEN_TAGS = re.compile(r'>\s+<')
COLOR_ATTR_RE = re.compile(r'(?<=\s)(fill|stroke)="(?!none"|url\()[^"]*"')
MASK_RE = re.compile(r'(<mask\b[^>]*/>|<mask\b.*?</mask>)', re.DOTALL)
ROOT_SVG_RE = re.compile(r'<svg\b[^>]*>')
WIDTH_ATTR_RE = re.compile(r'\swidth="[^"]*"')
HEIGHT_ATTR_RE = re.compile(r'\sheight="[^"]*"')

ICON_SIZE = '1em'


def optimize_svg(content: str, preserve_colors: bool = False, non_square: bool = False) -> str:
    text = content.replace('\r\n', '\n').replace('\r', '\n')
    text = XML_DECLARATION_RE.sub('', text)
    text = DOCTYPE_RE.sub('', text)
    text = COMMENT_RE.sub('', text)
    text = WHITESPACE_BETWEEN_TAGS.sub('><', text).strip()

    if not preserve_colors:
        text = _strip_colors(text)

    return ROOT_SVG_RE.sub(lambda match: _resize_root(match.group(0), non_square), text, count=1)


def _resize_root(tag: str, non_square: bool) -> str:
    closing = '/>' if tag.endswith('/>') else '>'
    attrs = tag[len('<svg'):-len(closing)]
    attrs = WIDTH_ATTR_RE.sub('', attrs)
    attrs = HEIGHT_ATTR_RE.sub('', attrs).rstrip()

    # Without a width the viewBox keeps the original aspect ratio
    size = f' height="{ICON_SIZE}"' if non_square else f' width="{ICON_SIZE}" height="{ICON_SIZE}"'
    return f'<svg{size}{attrs}{closing}'


def _strip_colors(text: str) -> str:
    # Mask luminance depends on the fill values, masks are left as exported
    parts = MASK_RE.split(text)
    return ''.join(
        part if index % 2 else COLOR_ATTR_RE.sub(r'\1="currentColor"', part)
        for index, part in enumerate(parts)
    )
