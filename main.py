from rich.pretty import pprint

from charter import *


class Add(ParsableCommand):
    configuration = CommandConfiguration(
        abstract="Print the sum of the values.",
        examples=[example("math add 1 2 3", description="prints 6")],
    )


class Math(ParsableCommand):
    configuration = CommandConfiguration(
        abstract="A utility for performing maths.",
        version="1.0.0",
        subcommands=[Add],
        default_subcommand=Add,
    )


if __name__ == '__main__':
    pprint(Math.configuration)
    pprint([" ".join(map(command_name, path)) for path in walk(Math)])
