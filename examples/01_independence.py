import logging
import ratlinalg as rl
from ratlinalg import DenseMatrix, ExactFraction

logging.basicConfig(level=logging.DEBUG)

# three column vectors
v1 = [ExactFraction(1), ExactFraction(0), ExactFraction(5)]
v2 = [ExactFraction(-2), ExactFraction(2), ExactFraction(0)]
v3 = [ExactFraction(1), ExactFraction(-8), ExactFraction(-5)]

A = DenseMatrix.from_columns([v1, v2, v3])
print('A =')
print(A)

print('\nA is' + (' ' if A.linearly_independent() else ' NOT ') + 'linearly independent.\n')
print('det(A) = ' + str(A.det()) + '\n')

b = [0, 8, 10]
x = A.solve(b)
print('Ax=b; x = ' + (' '.join(str(v) for v in x) if x is not None else 'NO SOLUTION') + '\n')

B = DenseMatrix.from_rows([[1, 2], [3, 4], [5, 6]])
print('A * B = C =')
print(A * B)

print('\n' + str(ExactFraction(10, 2)))
print(rl.rref([[1, -2, 1, 0], [0, 2, -8, 8], [5, 0, -5, 10]]).matrix.to_multiline_string())
