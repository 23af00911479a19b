from typing import Callable


def get_input(
    input_message: str,
    fn_validation: Callable[[int], bool],
    error_message: str = "",
) -> int:
    """Prompt for an integer until fn_validation accepts it.

    - input_message: prompt shown to the user
    - fn_validation: predicate taking the parsed int and returning True if valid
    - error_message: printed after a rejected answer (nothing when empty)

    EOFError / KeyboardInterrupt are left to the caller.
    """
    while True:
        try:
            result = int(input(input_message).strip())
            if fn_validation(result):
                return result
        except ValueError:
            pass
        if error_message:
            print(error_message)
