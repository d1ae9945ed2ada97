# Opcodes
ADD = 1   # P1 + P2 -> M[P3]
MUL = 2   # P1 * P2 -> M[P3]
INP = 3   # input -> M[P1]
OUT = 4   # P1 -> output
JIT = 5   # if P1 .ne 0 jmp P2
JIF = 6   # if P1 .eq 0 jmp P2
SLT = 7   # P1 .lt P2 -> M[P3]
SEQ = 8   # P1 .eq P2 -> M[P3]
ARB = 9   # RB + P1 -> RB
HLT = 99

# Parameter modes
POSITION = 0
IMMEDIATE = 1
RELATIVE = 2

MODES = (POSITION, IMMEDIATE, RELATIVE)
