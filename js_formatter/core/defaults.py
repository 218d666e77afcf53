"""
Built-in configuration used when no rc file overrides it.
"""

# Flat ESLint config object. Only fixable rules are worth listing here,
# everything else would just add noise to the lint report.
DEFAULT_LINT_CONFIG = {
    'languageOptions': {
        'ecmaVersion': 'latest',
        'sourceType': 'script',
    },
    'rules': {
        'semi': ['error', 'always'],
        'no-extra-semi': 'error',
        'quotes': ['error', 'single', {'avoidEscape': True}],
        'curly': ['error', 'all'],
        'dot-notation': 'error',
        'eqeqeq': ['error', 'smart'],
        'no-extra-boolean-cast': 'error',
        'no-var': 'off',
        'no-trailing-spaces': 'error',
        'eol-last': ['error', 'always'],
        'comma-dangle': ['error', 'never'],
        'new-parens': 'error',
        'no-floating-decimal': 'error',
        'wrap-iife': ['error', 'any'],
        'space-infix-ops': 'error',
        'keyword-spacing': 'error',
    },
}

# jsbeautifier option names
DEFAULT_BEAUTIFY_CONFIG = {
    'indent_size': 4,
    'indent_char': ' ',
    'eol': '\n',
    'end_with_newline': True,
    'preserve_newlines': True,
    'max_preserve_newlines': 2,
    'space_in_paren': False,
    'jslint_happy': False,
    'space_after_anon_function': True,
    'brace_style': 'collapse',
    'keep_array_indentation': False,
    'wrap_line_length': 120,
}

LINT_RC_NAME = '.jsfixrc'
BEAUTIFY_RC_NAME = '.jsbeautifyrc'
