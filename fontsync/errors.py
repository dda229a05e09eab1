# fontsync/errors.py
"""Exceptions raised by the font mirror."""


class FontSyncError(Exception):
    pass


class MissingCredentialError(FontSyncError):
    pass


class FetchError(FontSyncError):
    def __init__(self, url: str, reason: object):
        super().__init__(f"GET {url} failed: {reason}")
        self.url = url
        self.reason = reason


class UnparsableBlockError(FontSyncError):
    def __init__(self, subset: str, missing: str):
        super().__init__(f"unparsable @font-face block for subset '{subset}': no {missing}")
        self.subset = subset
        self.missing = missing
