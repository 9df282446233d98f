from pytest import Item, fixture

from revpol.lexer import Lexer
from revpol.machine import Machine


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          # Get rid of full-diff, -vv for full diff, etc.
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def machine() -> Machine:
    return Machine()


@fixture
def evaluate(machine):
    '''
    Queue a line on the machine, run it, and return the final outcome.
    '''
    lexer = Lexer()

    def evaluate(line):
        for operation in lexer.tokens(line):
            machine.push(operation)
        return machine.run()
    return evaluate
