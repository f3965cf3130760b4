from rich.pretty import pprint

from helpwright import *

options = Options(
    Option("f", "file", "read input from FILE", arg_name="FILE", required=True),
    Option("v", "verbose", "print more details", since="1.2"),
    Option(long_opt="legacy", descr="old behavior", deprecated=True),
).add_group(OptionGroup(
    Option("q", "quiet", "print nothing"),
    Option("l", "loud", "print everything"),
))


if __name__ == '__main__':
    pprint(options)
    HelpFormatter().print_help("prog", "Process some files.", options, "See the manual for more.", True)
    HelpFormatter(ConsoleHelpWriter()).print_help("prog", "Process some files.", options, None, True)
