import re
import logging

logger = logging.getLogger(__name__)

TEXT_CONTENT_TYPES = ('text/plain',)
TEXT_EXTENSIONS = ('.txt',)


class TextProcessor:
    def __init__(self):
        # Applied in order; line breaks are kept because bullets are line-based
        self.text_cleaning_patterns = [
            (r'\r\n?', '\n'),  # Windows/old Mac line endings
            (r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]', ''),  # Control characters
            (r'[ \t\u00a0]+', ' '),  # Runs of spaces, tabs and no-break spaces
            (r' *\n *', '\n'),  # Spaces around line breaks
            (r'\n{3,}', '\n\n'),  # More than one blank line
        ]

    @staticmethod
    def is_supported(filename: str, content_type: str) -> bool:
        """Plain-text uploads only; PDF/DOCX must be converted by the caller"""
        if content_type and content_type.split(';')[0].strip().lower() in TEXT_CONTENT_TYPES:
            return True
        return bool(filename) and filename.lower().endswith(TEXT_EXTENSIONS)

    def extract_text(self, data: bytes) -> str:
        """
        Decode an uploaded text file and normalize it
        """
        try:
            text = data.decode('utf-8-sig')
        except UnicodeDecodeError:
            logger.warning("Upload is not valid UTF-8, decoding as latin-1")
            text = data.decode('latin-1')

        cleaned_text = self.clean_text(text)
        logger.info(f"Extracted {len(cleaned_text)} characters from text upload")
        return cleaned_text

    def clean_text(self, text: str) -> str:
        """
        Clean and normalize extracted text
        """
        for pattern, replacement in self.text_cleaning_patterns:
            text = re.sub(pattern, replacement, text)

        return text.strip()
