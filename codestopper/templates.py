"""Canned starting buffers, one per language."""

from __future__ import annotations

from .language import Language

LANGUAGE_TEMPLATES: dict[Language, str] = {
    Language.PYTHON: (
        "# Python Code\n"
        "def main():\n"
        '    print("Hello, World!")\n'
        "\n"
        'if __name__ == "__main__":\n'
        "    main()"
    ),
    Language.JAVA: (
        "// Java Code\n"
        "public class Main {\n"
        "    public static void main(String[] args) {\n"
        '        System.out.println("Hello, World!");\n'
        "    }\n"
        "}"
    ),
    Language.CPP: (
        "// C++ Code\n"
        "#include <iostream>\n"
        "using namespace std;\n"
        "\n"
        "int main() {\n"
        '    cout << "Hello, World!" << endl;\n'
        "    return 0;\n"
        "}"
    ),
}


def template_for(language: Language) -> str:
    return LANGUAGE_TEMPLATES[language]
