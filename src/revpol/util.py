class RevpolError(Exception):
    pass


class ParseError(RevpolError):
    '''
    Word is neither an operator nor a number.

    Keeps the offending word around, untouched, for the driver to report.
    '''
    def __init__(self, word):
        super().__init__("Couldn't parse {0}".format(word))
        self.word = word
