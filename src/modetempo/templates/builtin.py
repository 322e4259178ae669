"""Built-in modes and templates.

Bodies are Jinja2 templates for the reference engine; ``region`` holds the
captured text when a template is expanded around a selection and is empty
otherwise.
"""

from typing import List

from ..core.types import TemplateDefinition
from ..hierarchy.modes import ModeTable
from .loader import define_templates
from .registry import TemplateRegistry

BUILTIN_MODES = {
    "prog": None,
    "c": "prog",
    "c++": "c",
    "text": None,
    "markdown": "text",
}

PROG_TEMPLATES = [
    ("todo", "TODO: {{ region }}", "TODO marker"),
    ("fixme", "FIXME: {{ region }}", "FIXME marker"),
]

C_TEMPLATES = [
    ("if", "if () {\n{{ region }}\n}", "if statement"),
    ("else", "else {\n{{ region }}\n}", "else clause"),
    ("ifelse", "if () {\n{{ region }}\n} else {\n\n}", "if statement with else"),
    ("while", "while () {\n{{ region }}\n}", "while loop"),
    ("for", "for (; ; ) {\n{{ region }}\n}", "for loop"),
    ("fori", "for (i = 0; i < ; i++) {\n{{ region }}\n}", "counting for loop"),
    ("do", "do {\n{{ region }}\n} while ();", "do/while loop"),
    ("switch", "switch () {\n{{ region }}\n}", "switch statement"),
    ("case", "case :\n{{ region }}\nbreak;", "case label"),
    ("main", "int main(int argc, char *argv[])\n{\n{{ region }}\nreturn 0;\n}", "main function"),
    ("include", "#include <{{ region }}>", "include directive"),
    ("malloc", "({{ region }} *) malloc(sizeof({{ region }}))", "typed malloc"),
    ("struct", "struct {{ region }} {\n\n};", "struct definition"),
    ("typedef", "typedef {{ region }} ;", "typedef"),
]

# Shared by C and C++ as a single definition with two owners
PREPROCESSOR_TEMPLATES = [
    ("define", "#define {{ region }}", "macro definition"),
    ("ifdef", "#ifdef {{ region }}\n\n#endif", "#ifdef block"),
    ("ifndef", "#ifndef {{ region }}\n#define {{ region }}\n\n#endif", "include guard"),
]

CPP_TEMPLATES = [
    ("class", "class {{ region }} {\npublic:\n\n};", "class definition"),
    ("include", "#include <{{ region }}>\nusing namespace std;", "include with namespace"),
    ("cout", "std::cout << {{ region }} << std::endl;", "print to stdout"),
]

MARKDOWN_TEMPLATES = [
    ("h1", "# {{ region }}", "level 1 heading"),
    ("link", "[{{ region }}]()", "inline link"),
    ("code", "```\n{{ region }}\n```", "fenced code block"),
]


def install_builtin_templates(registry: TemplateRegistry, modes: ModeTable) -> List[TemplateDefinition]:
    """Declare the built-in modes and register the built-in templates."""
    for name, parent in BUILTIN_MODES.items():
        modes.define(name, parent)

    definitions = []
    definitions += define_templates(registry, "prog", PROG_TEMPLATES)
    definitions += define_templates(registry, "c", C_TEMPLATES)
    definitions += define_templates(registry, {"c", "c++"}, PREPROCESSOR_TEMPLATES)
    definitions += define_templates(registry, "c++", CPP_TEMPLATES)
    definitions += define_templates(registry, "markdown", MARKDOWN_TEMPLATES)
    return definitions
