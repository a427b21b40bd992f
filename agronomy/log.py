# agronomy/log.py
import logging
import re


class SensitiveDataFilter(logging.Filter):
    """Mask credentials that end up in log records (query strings, auth headers)."""

    SENSITIVE_PATTERNS = [
        (re.compile(r'(appid=)[^&\s\'"]+', re.IGNORECASE), r'\1***'),
        (re.compile(r'(api[_-]?key["\']?\s*[:=]\s*["\']?)[^"\'\s&,]+', re.IGNORECASE), r'\1***'),
        (re.compile(r'(Bearer\s+)[^\s"\']+', re.IGNORECASE), r'\1***'),
    ]

    def mask(self, text):
        for pattern, replacement in self.SENSITIVE_PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def filter(self, record):
        if isinstance(record.msg, str):
            record.msg = self.mask(record.msg)
        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self.mask(v) if isinstance(v, str) else v for k, v in record.args.items()}
            else:
                record.args = tuple(self.mask(a) if isinstance(a, str) else a for a in record.args)
        if record.exc_info and record.exc_info[1] is not None and not record.exc_text:
            record.exc_text = self.mask(logging.Formatter().formatException(record.exc_info))
        return True
