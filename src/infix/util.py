from functools import wraps


class ExpressionError(Exception):
    pass


class LexError(ExpressionError):
    '''
    Malformed numeric literal.
    '''


class LiteralOverflow(LexError, OverflowError):
    '''
    Numeric literal that doesn't fit in a double.
    '''


class ExpressionSyntaxError(ExpressionError):
    '''
    Tokens in the wrong order, leftover input, or operand count mismatch.
    '''


class UnbalancedBracket(ExpressionSyntaxError):
    pass


class UnknownVariable(ExpressionError, LookupError):
    pass


def wrap_user_errors(error, fmt):
    '''
    Decorator that converts any exception into error, formatted with fmt.

    Passes through ExpressionErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except ExpressionError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
