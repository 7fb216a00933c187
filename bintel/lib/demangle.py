"""Symbol demangling for callee names in listings and call graph reports."""

SYMBOLIC_FOUND = True
try:
    from symbolic._lowlevel import ffi, lib
    from symbolic.utils import encode_str, decode_str, rustcall
except OSError:
    SYMBOLIC_FOUND = False

# Escapes used by legacy rust mangling and by some MinGW toolchains
_LEGACY_ESCAPES = (
    ("..", "::"),
    ("$SP$", "@"),
    ("$BP$", "*"),
    ("$LT$", "<"),
    ("$GT$", ">"),
    ("$RF$", "&"),
    ("$LP$", "("),
    ("$RP$", ")"),
    ("$C$", ","),
    ("$u5b$", "["),
    ("$u5d$", "]"),
    ("$u7b$", "{"),
    ("$u7d$", "}"),
    ("$u3b$", ";"),
    ("$u20$", " "),
    ("$u27$", "'"),
)

_ANONYMOUS_PREFIXES = ("__imp_anon.", "anon.", ".L__unnamed")
_DLLIMPORT_PREFIXES = ("__imp_", ".rdata$", ".refptr.")

# Itanium C++ ABI builtin type codes
_ITANIUM_BUILTIN_TYPES = {
    "v": "void",
    "w": "wchar_t",
    "b": "bool",
    "c": "char",
    "a": "signed char",
    "h": "unsigned char",
    "s": "short",
    "t": "unsigned short",
    "i": "int",
    "j": "unsigned int",
    "l": "long",
    "m": "unsigned long",
    "x": "long long",
    "y": "unsigned long long",
    "n": "__int128",
    "o": "unsigned __int128",
    "f": "float",
    "d": "double",
    "e": "long double",
    "g": "float",
    "z": "ellipsis",
}


def itanium_builtin_type(code):
    """Returns the C++ spelling of an Itanium builtin type code, or an empty string."""
    return _ITANIUM_BUILTIN_TYPES.get(code, "")


def _apply_heuristics(symbol):
    for prefix in _ANONYMOUS_PREFIXES:
        if symbol.startswith(prefix):
            return "anonymous"
    if symbol.startswith("GCC_except_table"):
        return "GCC_except_table"
    if symbol.startswith("@feat.00"):
        return "SAFESEH"
    for prefix in _DLLIMPORT_PREFIXES:
        if symbol.startswith(prefix):
            symbol = f"__declspec(dllimport) {symbol.removeprefix(prefix)}"
            break
    for escaped, plain in _LEGACY_ESCAPES:
        symbol = symbol.replace(escaped, plain)
    return symbol


def _trim_rust_hash(name):
    if name.count("::") > 3:
        last_part = name.split("::")[-1]
        if len(last_part) == 17:
            return name.removesuffix(f"::{last_part}")
    return name


def demangle_symbolic_name(symbol, lang=None, no_args=False):
    """Demangles symbol using llvm demangle falling back to some heuristics. Covers legacy rust."""
    if not SYMBOLIC_FOUND or not symbol:
        return symbol
    try:
        func = lib.symbolic_demangle_no_args if no_args else lib.symbolic_demangle
        lang_str = encode_str(lang) if lang else ffi.NULL
        demangled = rustcall(func, encode_str(symbol), lang_str)
        demangled_symbol = decode_str(demangled, free=True).strip()
    except AttributeError:
        return symbol
    # demangling didn't work
    if symbol == demangled_symbol:
        demangled_symbol = _apply_heuristics(symbol)
    return _trim_rust_hash(demangled_symbol)
