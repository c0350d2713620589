import enum

import parse_helpers


class Command(enum.IntEnum):
	EXIT        = 0
	ADD         = 1
	SCALE       = 2
	MULTIPLY    = 3
	TRANSPOSE   = 4
	DETERMINANT = 5
	INVERSE     = 6

class Transpose(enum.IntEnum):
	MAIN       = 1
	SIDE       = 2
	VERTICAL   = 3
	HORIZONTAL = 4

MENU = (
	"1. Add matrices\n"
	"2. Multiply matrix to a constant\n"
	"3. Multiply matrices\n"
	"4. Transpose matrix\n"
	"5. Calculate a determinant\n"
	"6. Inverse matrix\n"
	"0. Exit\n"
	"Your choice: "
)
TRANSPOSE_MENU = (
	"\n"
	"1. Main diagonal\n"
	"2. Side diagonal\n"
	"3. Vertical line\n"
	"4. Horizontal line\n"
	"Your choice: "
)

CAPTIONS = {
	Command.ADD:         "The addition result is:",
	Command.SCALE:       "The multiplication result is:",
	Command.MULTIPLY:    "The multiplication result is:",
	Command.TRANSPOSE:   "The result is:",
	Command.DETERMINANT: "The result is:",
	Command.INVERSE:     "The result is:",
}

def parse_choice(token, enum_type):
	try:
		return enum_type(int(token))
	except ValueError:
		raise ValueError("Unknown choice: %r"%token)

def _read_matrix(tokenstream, prompt, size_text, matrix_text):
	prompt(size_text)
	rows,columns = parse_helpers.parse_shape(tokenstream)
	prompt(matrix_text)
	return parse_helpers.parse_entries(tokenstream, rows,columns)

def dispatch(command, tokenstream, prompt=None):
	#Returns a `Matrix`, a float, or `None` (non-square determinant, or `Command.EXIT`)
	if prompt is None: prompt=lambda text: None

	if   command == Command.EXIT:
		return None
	elif command == Command.ADD or command == Command.MULTIPLY:
		a = _read_matrix(tokenstream, prompt, "Enter size of first matrix:", "Enter first matrix:")
		b = _read_matrix(tokenstream, prompt, "Enter size of second matrix:","Enter second matrix:")
		if command == Command.ADD: return a.add(b)
		else:                      return a.multiply(b)
	elif command == Command.SCALE:
		a = _read_matrix(tokenstream, prompt, "Enter size of matrix:", "Enter matrix:")
		prompt("Enter constant:")
		x = parse_helpers.parse_float(tokenstream)
		return a.scale(x)
	elif command == Command.TRANSPOSE:
		prompt(TRANSPOSE_MENU)
		token = tokenstream.pop_next()
		a = _read_matrix(tokenstream, prompt, "Enter matrix size:", "Enter matrix:")
		choice = parse_choice(token, Transpose)
		if   choice == Transpose.MAIN:     return a.transpose_main()
		elif choice == Transpose.SIDE:     return a.transpose_side()
		elif choice == Transpose.VERTICAL: return a.transpose_ver()
		else:                              return a.transpose_hor()
	elif command == Command.DETERMINANT:
		a = _read_matrix(tokenstream, prompt, "Enter matrix size:", "Enter matrix:")
		return a.determinant()
	elif command == Command.INVERSE:
		a = _read_matrix(tokenstream, prompt, "Enter matrix size:", "Enter matrix:")
		return a.invert()
	else:
		assert False, command

def write_result(file, result, line_prefix=""):
	if result is None or isinstance(result,float):
		file.write(line_prefix+str(result)+"\n")
	else:
		result.write(file, line_prefix)
