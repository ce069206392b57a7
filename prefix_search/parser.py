import re
import unicodedata

WORD_RE = re.compile(r"[a-z]+")
NUMBER_RE = re.compile(r"[0-9]+")
FRAGMENT_CHAR_RE = re.compile(r"[A-Za-z0-9]")


class Parser:
    """
    Query/text tokenizer shared by search and autocomplete.
    Must produce exactly the tokens the corpus dictionary was built with,
    so it does nothing beyond case and accent folding.

    What it does:
    - Lowercases and strips accents, so "Café" and "cafe" are the same token
    - Emits letter runs first, then digit runs: "abc 12 def" -> abc, def, 12
    - Everything else (punctuation, entities, non-Latin scripts) is a separator

    Methods:
        normalize(text: str) -> str
        tokenize(text: str) -> list[str]
        fragment_at(text: str, caret: int) -> (fragment, start, end)
    """

    def normalize(self, text: str) -> str:
        """
        Lowercase, decompose, and drop combining marks.
        Non-ASCII letters that have no ASCII base survive here but are
        dropped later by tokenize().
        """
        decomposed = unicodedata.normalize("NFD", text.lower())
        return "".join(ch for ch in decomposed if not unicodedata.combining(ch))

    def tokenize(self, text: str) -> list[str]:
        """
        Normalize and tokenize a raw text string.
        - Every maximal run of a-z, left to right
        - then every maximal run of 0-9, left to right
        - Return [] if nothing remains after tokenization
        """
        if not text:
            return []
        text = self.normalize(text)
        return WORD_RE.findall(text) + NUMBER_RE.findall(text)

    def fragment_at(self, text: str, caret: int):
        """
        Find the word being edited at `caret`.
        Scans left and right over contiguous ASCII letters/digits, ignoring any
        other token in the input. Accented or non-Latin characters end the scan.
        Returns:
            (fragment:str, start:int, end:int) with text[start:end] == fragment
        """
        caret = max(0, min(caret, len(text)))
        start = caret
        while start > 0 and FRAGMENT_CHAR_RE.match(text[start - 1]):
            start -= 1
        end = caret
        while end < len(text) and FRAGMENT_CHAR_RE.match(text[end]):
            end += 1
        return text[start:end], start, end


_default_parser = Parser()


def tokenize(text: str) -> list[str]:
    return _default_parser.tokenize(text)


def fragment_at(text: str, caret: int):
    return _default_parser.fragment_at(text, caret)


if __name__ == "__main__":
    for sample in ["Café 123", "COVID-19 vaccine", "école 2023-10-06", "AT&amp;T"]:
        print(repr(sample), "->", tokenize(sample))
