#Recursive determinant code over a `Matrix` (1-based indexing).
#	Rows and columns already removed are passed down explicitly instead of copying each submatrix.

def _remaining(count, excluded):
	return [ k for k in range(1,count+1) if k not in excluded ]

def cofactor_sign(i,j):
	if (i+j) % 2 == 0: return  1
	else:              return -1

#	Determinant of the submatrix left after removing `skip_rows` and `skip_cols`
def matr_det(m, skip_rows=(),skip_cols=()):
	rows = _remaining(m.rows,   skip_rows)
	cols = _remaining(m.columns,skip_cols)
	assert len(rows) == len(cols)

	n = len(rows)
	if   n == 0:
		#Empty product
		return 1.0
	elif n == 1:
		return m[rows[0],cols[0]]
	elif n == 2:
		r0,r1 = rows; c0,c1 = cols
		return m[r0,c0]*m[r1,c1] - m[r0,c1]*m[r1,c0]
	else:
		#Expand along the first remaining row; signs follow the position inside the submatrix
		top = rows[0]
		det = 0.0
		for k in range(n):
			c = cols[k]
			det += m[top,c] * ( cofactor_sign(1,k+1) * matr_det(m, tuple(skip_rows)+(top,),tuple(skip_cols)+(c,)) )
		return det

#	Minor
def matr_minor(m, i,j):
	return matr_det(m, (i,),(j,))

#	Cofactor
def matr_cofactor(m, i,j):
	return cofactor_sign(i,j) * matr_minor(m, i,j)
