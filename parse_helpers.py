from matrix import Matrix


def parse_int(tokenstream):
	token = tokenstream.pop_next()
	try:
		return int(token)
	except ValueError:
		raise ValueError("Expected an integer, got %r"%token)

def parse_float(tokenstream):
	token = tokenstream.pop_next()
	try:
		return float(token)
	except ValueError:
		raise ValueError("Expected a number, got %r"%token)

def parse_shape(tokenstream):
	rows    = parse_int(tokenstream)
	columns = parse_int(tokenstream)
	if rows < 1 or columns < 1:
		raise ValueError("Matrix dimensions must be positive, got (%d, %d)"%(rows,columns))
	return rows,columns

def parse_entries(tokenstream, rows,columns):
	return Matrix.from_supplier(rows,columns, lambda: parse_float(tokenstream))

def parse_matrix(tokenstream):
	rows,columns = parse_shape(tokenstream)
	return parse_entries(tokenstream, rows,columns)
