"""
Language table — every language that needs nothing beyond its
formatting facts and the default modifier chain.
"""

from __future__ import annotations

from leetgen.lang.base import BaseLang


def _c_style(name: str, slug: str, short_name: str, extension: str) -> BaseLang:
    return BaseLang(name, slug, short_name, extension, "//", "/*", "*/")


c = _c_style("C", "c", "c", "c")
cpp = _c_style("C++", "cpp", "cpp", "cpp")
csharp = _c_style("C#", "csharp", "cs", "cs")
java = _c_style("Java", "java", "java", "java")
javascript = _c_style("JavaScript", "javascript", "js", "js")
typescript = _c_style("TypeScript", "typescript", "ts", "ts")
rust = _c_style("Rust", "rust", "rs", "rs")
swift = _c_style("Swift", "swift", "swift", "swift")
kotlin = _c_style("Kotlin", "kotlin", "kt", "kt")
scala = _c_style("Scala", "scala", "scala", "scala")
dart = _c_style("Dart", "dart", "dart", "dart")
ruby = BaseLang("Ruby", "ruby", "rb", "rb", "#", "=begin", "=end")
racket = BaseLang("Racket", "racket", "rkt", "rkt", ";", "#|", "|#")
