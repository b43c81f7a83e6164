# No re-exports here: core.store imports parsers.common, which would cycle
# through parsers.ini_parser. Import submodules directly.
