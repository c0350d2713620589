import numbers

import math_helpers


class MatrixError(Exception):
	pass
class IncompatibleDimension(MatrixError):
	def __init__(self, message, *shapes):
		MatrixError.__init__(self, message)
		self.shapes = shapes
class ZeroDeterminant(MatrixError):
	pass
class IndexOutOfRange(MatrixError, IndexError):
	pass

def _fmt_shape(shape):
	return "(%d, %d)" % shape

class Matrix(object):
	#1-based `(row, column)` entries; `rule(i, j)`, if given, fills them in row-major order
	def __init__(self, rows, columns, rule=None):
		if rows < 1 or columns < 1:
			raise ValueError("Matrix dimensions must be positive, got (%d, %d)" % (rows,columns))
		self._rows = rows
		self._columns = columns
		self._body = [ [0.0]*columns for i in range(rows) ]
		if rule is not None:
			for i,j in self.indices():
				self[i,j] = rule(i,j)

	@classmethod
	def from_supplier(cls, rows, columns, supplier):
		return cls(rows,columns, lambda i,j: supplier())
	@classmethod
	def from_rows(cls, rows_list):
		rows_list = [ list(row) for row in rows_list ]
		if len(rows_list) == 0:
			raise ValueError("Matrix needs at least one row")
		columns = len(rows_list[0])
		for row in rows_list:
			if len(row) != columns:
				raise ValueError("Inconsistent row size: expected %d entries, got %d" % (columns,len(row)))
		return cls(len(rows_list),columns, lambda i,j: rows_list[i-1][j-1])
	@classmethod
	def identity(cls, n):
		return cls(n,n, lambda i,j: 1.0 if i==j else 0.0)

	@property
	def rows(self):
		return self._rows
	@property
	def columns(self):
		return self._columns
	@property
	def shape(self):
		return ( self._rows, self._columns )

	def indices(self):
		return [ (i,j) for i in range(1,self._rows+1) for j in range(1,self._columns+1) ]

	def _check_index(self, i,j):
		if not 1 <= i <= self._rows or not 1 <= j <= self._columns:
			raise IndexOutOfRange(
				"Index (%d, %d) is out of range for a %s matrix" % (i,j,_fmt_shape(self.shape))
			)
	def get(self, i,j):
		self._check_index(i,j)
		return self._body[i-1][j-1]
	def set(self, i,j, value):
		self._check_index(i,j)
		self._body[i-1][j-1] = float(value)
	def __getitem__(self, index):
		i,j = index
		return self.get(i,j)
	def __setitem__(self, index, value):
		i,j = index
		self.set(i,j, value)

	def to_rows(self):
		return [ list(row) for row in self._body ]

	def add(self, other):
		if self.shape != other.shape:
			raise IncompatibleDimension(
				"Impossible to sum matrices with different dimensions: %s != %s" % (_fmt_shape(self.shape),_fmt_shape(other.shape)),
				self.shape, other.shape
			)
		return Matrix(self._rows,self._columns, lambda i,j: self[i,j] + other[i,j])
	def scale(self, scalar):
		return Matrix(self._rows,self._columns, lambda i,j: self[i,j] * scalar)
	def multiply(self, other):
		if self._columns != other.rows:
			raise IncompatibleDimension(
				"Impossible to multiply matrices with these dimensions: %s and %s" % (_fmt_shape(self.shape),_fmt_shape(other.shape)),
				self.shape, other.shape
			)
		def rule(i,j):
			total = 0.0
			for k in range(1,self._columns+1):
				total += self[i,k] * other[k,j]
			return total
		return Matrix(self._rows,other.columns, rule)

	def transpose_main(self):
		return Matrix(self._columns,self._rows, lambda i,j: self[j,i])
	def transpose_side(self):
		return Matrix(self._columns,self._rows, lambda i,j: self[self._rows+1-j,self._columns+1-i])
	def transpose_ver(self):
		return Matrix(self._rows,self._columns, lambda i,j: self[i,self._columns+1-j])
	def transpose_hor(self):
		return Matrix(self._rows,self._columns, lambda i,j: self[self._rows+1-i,j])

	def determinant(self):
		#`None` when not square
		if self._rows != self._columns: return None
		return math_helpers.matr_det(self)
	@property
	def det(self):
		return self.determinant()

	def invert(self):
		#Adjugate over determinant; the zero check is exact, with no tolerance
		det = self.determinant()
		if det is None:
			raise IncompatibleDimension(
				"Impossible to invert non-square matrix %s" % _fmt_shape(self.shape),
				self.shape
			)
		if det == 0.0:
			raise ZeroDeterminant("Impossible to invert matrix with zero determinant")
		cofactors = Matrix(self._rows,self._columns, lambda i,j: math_helpers.matr_cofactor(self,i,j))
		return cofactors.transpose_main().scale(1.0/det)

	def __add__(self, other):
		if not isinstance(other,Matrix): return NotImplemented
		return self.add(other)
	def __mul__(self, other):
		if isinstance(other,Matrix):           return self.multiply(other)
		if isinstance(other,numbers.Real):     return self.scale(other)
		return NotImplemented
	def __rmul__(self, other):
		if isinstance(other,numbers.Real): return self.scale(other)
		return NotImplemented
	def __invert__(self):
		return self.invert()

	def write(self, file, line_prefix=""):
		for row in self._body:
			file.write(line_prefix+" ".join([ str(value) for value in row ])+"\n")

	def __eq__(self, other):
		if not isinstance(other,Matrix): return NotImplemented
		return self.shape == other.shape and self._body == other._body
	def __ne__(self, other):
		result = self.__eq__(other)
		if result is NotImplemented: return result
		return not result
	#Mutable entries
	__hash__ = None

	def __repr__(self):
		return "Matrix(%d, %d, %r)" % (self._rows,self._columns,self._body)
