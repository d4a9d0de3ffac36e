"""Closed token vocabularies with bidirectional text lookup.

Each vocabulary is an Enum whose member values are the canonical spellings
used in rule text. The member set is fixed at import time.
"""

from enum import Enum, unique


class Token(Enum):
    """Base for vocabularies mapping symbols to their canonical text."""

    @property
    def text(self) -> str:
        """Canonical spelling of this token."""
        return self.value

    @classmethod
    def from_text(cls, text):
        """Return the member spelled exactly ``text``, or None.

        Matching is case-sensitive with no trimming.
        """
        if not isinstance(text, str):
            return None
        try:
            return cls(text)
        except ValueError:
            return None

    @classmethod
    def variants(cls) -> tuple:
        """All members in declaration order."""
        return tuple(cls)


@unique
class InputType(Token):
    """Variables a rule can inspect."""

    # Combined size of all request parameters, files excluded.
    ARGS_COMBINED_SIZE = "ARGS_COMBINED_SIZE"
    # Query string parameters only.
    ARGS_GET = "ARGS_GET"
    ARGS_GET_NAMES = "ARGS_GET_NAMES"
    # Arguments from the POST body.
    ARGS_POST = "ARGS_POST"
    ARGS_POST_NAMES = "ARGS_POST_NAMES"
    # ARGS_GET + ARGS_POST
    ARGS = "ARGS"
    # ARGS_GET_NAMES + ARGS_POST_NAMES
    ARGS_NAMES = "ARGS_NAMES"
    # Milliseconds since the start of the transaction.
    DURATION = "DURATION"
    FILES_COMBINED_SIZE = "FILES_COMBINED_SIZE"
    FILES_NAMES = "FILES_NAMES"
    # Original file names of multipart uploads.
    FILES = "FILES"
    # Populated by the last @geoLookup.
    GEO = "GEO"
    IP = "IP"
    MATCHED_VAR = "MATCHED_VAR"
    MATCHED_VAR_NAME = "MATCHED_VAR_NAME"
    MATCHED_VARS = "MATCHED_VARS"
    MATCHED_VARS_NAMES = "MATCHED_VARS_NAMES"
    MULTIPART_PART_HEADERS = "MULTIPART_PART_HEADERS"
    # Raw query string, never URL-decoded.
    QUERY_STRING = "QUERY_STRING"
    REMOTE_ADDR = "REMOTE_ADDR"
    # URLENCODED, MULTIPART or XML.
    REQBODY_PROCESSOR = "REQBODY_PROCESSOR"
    REQUEST_BASENAME = "REQUEST_BASENAME"
    REQUEST_BODY = "REQUEST_BODY"
    REQUEST_COOKIES_NAMES = "REQUEST_COOKIES_NAMES"
    REQUEST_COOKIES = "REQUEST_COOKIES"
    # Relative request URL without the query string.
    REQUEST_FILENAME = "REQUEST_FILENAME"
    REQUEST_HEADERS_NAMES = "REQUEST_HEADERS_NAMES"
    # All request headers, or one with REQUEST_HEADERS:Header-Name.
    REQUEST_HEADERS = "REQUEST_HEADERS"
    REQUEST_LINE = "REQUEST_LINE"
    REQUEST_METHOD = "REQUEST_METHOD"
    REQUEST_PROTOCOL = "REQUEST_PROTOCOL"
    REQUEST_URI = "REQUEST_URI"
    # REQUEST_URI including the domain name when the request line had one.
    REQUEST_URI_RAW = "REQUEST_URI_RAW"
    RESPONSE_BODY = "RESPONSE_BODY"
    RESPONSE_STATUS = "RESPONSE_STATUS"
    # Transient transaction collection (anomaly scores, captures, ...).
    TX = "TX"
    UNIQUE_ID = "UNIQUE_ID"
    # XPath target, or standalone for @validateDTD / @validateSchema.
    XML = "XML"


@unique
class SelectorType(Token):
    """Modifier prefixes of an input reference."""

    INCLUDE = ""
    EXCLUDE = "!"
    COUNT = "&"


@unique
class OperatorType(Token):
    """Match operators, spelled without the leading ``@``."""

    BEGINS_WITH = "beginsWith"
    CONTAINS = "contains"
    CONTAINS_WORD = "containsWord"
    DETECT_SQLI = "detectSQLi"
    DETECT_XSS = "detectXSS"
    ENDS_WITH = "endsWith"
    EQ = "eq"
    FUZZY_HASH = "fuzzyHash"
    GE = "ge"
    GEO_LOOKUP = "geoLookup"
    GSB_LOOKUP = "gsbLookup"
    GT = "gt"
    INSPECT_FILE = "inspectFile"
    IP_MATCH = "ipMatch"
    IP_MATCH_FROM_FILE = "ipMatchFromFile"
    LE = "le"
    LT = "lt"
    NO_MATCH = "noMatch"
    PM = "pm"
    PM_FROM_FILE = "pmFromFile"
    RBL = "rbl"
    RSUB = "rsub"
    RX = "rx"
    STREQ = "streq"
    STRMATCH = "strmatch"
    UNCONDITIONAL_MATCH = "unconditionalMatch"
    VALIDATE_BYTE_RANGE = "validateByteRange"
    VALIDATE_DTD = "validateDTD"
    VALIDATE_HASH = "validateHash"
    VALIDATE_SCHEMA = "validateSchema"
    VALIDATE_URL_ENCODING = "validateUrlEncoding"
    VALIDATE_UTF8_ENCODING = "validateUtf8Encoding"
    VERIFY_CC = "verifyCC"
    VERIFY_CPF = "verifyCPF"
    VERIFY_SSN = "verifySSN"
    WITHIN = "within"


@unique
class ActionType(Token):
    """Rule actions (disruptive, flow, metadata, data and non-disruptive)."""

    ACCURACY = "accuracy"
    ALLOW = "allow"
    APPEND = "append"
    AUDITLOG = "auditlog"
    BLOCK = "block"
    CAPTURE = "capture"
    CHAIN = "chain"
    CTL = "ctl"
    DENY = "deny"
    DEPRECATEVAR = "deprecatevar"
    DROP = "drop"
    EXEC = "exec"
    EXPIREVAR = "expirevar"
    ID = "id"
    INITCOL = "initcol"
    LOG = "log"
    LOGDATA = "logdata"
    MATURITY = "maturity"
    MSG = "msg"
    MULTI_MATCH = "multiMatch"
    NOAUDITLOG = "noauditlog"
    NOLOG = "nolog"
    PASS = "pass"
    PAUSE = "pause"
    PHASE = "phase"
    PREPEND = "prepend"
    PROXY = "proxy"
    REDIRECT = "redirect"
    REV = "rev"
    SANITISE_ARG = "sanitiseArg"
    SANITISE_MATCHED = "sanitiseMatched"
    SANITISE_MATCHED_BYTES = "sanitiseMatchedBytes"
    SANITISE_REQUEST_HEADER = "sanitiseRequestHeader"
    SANITISE_RESPONSE_HEADER = "sanitiseResponseHeader"
    SETENV = "setenv"
    SETRSC = "setrsc"
    SETSID = "setsid"
    SETUID = "setuid"
    SETVAR = "setvar"
    SEVERITY = "severity"
    SKIP = "skip"
    SKIP_AFTER = "skipAfter"
    STATUS = "status"
    T = "t"
    TAG = "tag"
    VER = "ver"
    XMLNS = "xmlns"
