"""Turn plain-text outlines into slide decks and videos.

The pipeline goes outline -> [`PresentationDocument`][slidefactory.models.\
PresentationDocument] (YAML) -> reveal.js HTML -> MP4. Only the first step has \
real logic, the others are thin consumers of the document.
"""

__version__ = "0.3.0"

app_name = "slidefactory"
