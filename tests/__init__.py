"""
edgar-nc - Test Suite

Test modules organized by functionality:
- unit/parsing/ - Lexer, tree builder, binder, body decoding, models, parser
- unit/ - Configuration, report formatting and CLI tests
"""
