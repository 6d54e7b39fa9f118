import sys

import progopts.errors
import progopts.parse
from progopts.parser import Parser
from progopts.spec import Option

USAGE = """\
usage: tar_like [-c|--create] [-z|--compress] [-v] [{-f|--filename} <filename>]
                [-?|--help] [{-C | --directory} <directory>]
                [--exclude <exclude expression>...] [{-l|--level} <level>]
                <FILE> ...
"""

OPTIONS = [
    #      Name         Short Long         Multi  Argument
    Option("create",    "c",  "create",    False, False),
    Option("compress",  "z",  "compress",  False, False),
    Option("help",      "?",  "help",      False, False),
    Option("level",     "l",  "level",     False, True),
    Option("filename",  "f",  "filename",  False, True),
    Option("verbose",   "v",  "",          True,  False),
    Option("directory", "C",  "directory", False, True),
    Option("exclude",   "",   "exclude",   True,  True),
]  # fmt: skip


def main(argv: list[str]) -> int:
    # If no options were given, that's an error.
    if len(argv) <= 1:
        print(USAGE, end="")
        return 1

    parser = Parser(OPTIONS)

    try:
        parser.parse_arguments(argv)
    except progopts.errors.OptionsError as e:
        print(e, end="\n\n")
        print(USAGE, end="")
        return 1

    print("\nInspecting program options...\n")

    try:
        if parser.option_given("help"):
            print(USAGE, end="")
            return 0

        if parser.option_given("create"):
            print("create flag was provided")

        if parser.option_given("compress"):
            print("compress flag was provided")

        if parser.option_given("filename"):
            filename = parser.get_option_string("filename")
            print(f"filename flag was provided with value = {filename}")

        if count := parser.get_option_count("verbose"):
            print(f"verbose flag was provided with {count} levels of verbosity")

        if parser.option_given("directory"):
            directory = parser.get_option_string("directory")
            print(f"directory flag was provided with value = {directory}")

        if parser.option_given("level"):
            level = parser.get_option_value(
                "level", progopts.parse.UInt32, min_value=0, max_value=99
            )
            print(f"level flag was provided with value = {level}")

        if parser.option_given("exclude"):
            print("exclude flag was provided with the following values:")
            for exclude in parser.get_option_strings("exclude"):
                print(f"    {exclude}")

        # Arguments that don't belong to any option end up here.
        if parser.option_given(""):
            print("filenames specified:")
            for filename in parser.get_option_strings(""):
                print(f"    {filename}")
    except progopts.errors.OptionsError as e:
        print(e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
