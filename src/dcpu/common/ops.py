# Basic (opcode field != 0)
SET = 0x01  # b = a
ADD = 0x02  # b + a -> b, EX = carry
SUB = 0x03  # b - a -> b, EX = underflow
MUL = 0x04  # b * a -> b, EX = high word
MLI = 0x05  # signed MUL
DIV = 0x06  # b / a -> b
DVI = 0x07  # signed DIV
MOD = 0x08  # b % a -> b
MDI = 0x09  # signed MOD
AND = 0x0A  # b & a -> b
BOR = 0x0B  # b | a -> b
XOR = 0x0C  # b ^ a -> b
SHR = 0x0D  # b >>> a -> b
ASR = 0x0E  # b >> a -> b (arithmetic)
SHL = 0x0F  # b << a -> b
IFB = 0x10  # exec next if (b & a) != 0
IFC = 0x11  # exec next if (b & a) == 0
IFE = 0x12  # exec next if b == a
IFN = 0x13  # exec next if b != a
IFG = 0x14  # exec next if b > a
IFA = 0x15  # signed IFG
IFL = 0x16  # exec next if b < a
IFU = 0x17  # signed IFL
ADX = 0x1A  # b + a + EX -> b
SBX = 0x1B  # b - a + EX -> b
STI = 0x1E  # b = a; I++; J++
STD = 0x1F  # b = a; I--; J--

# Special (opcode field == 0, selector in b)
JSR = 0x01  # push PC; PC = a
INT = 0x08  # software interrupt with message a
IAG = 0x09  # IA -> a
IAS = 0x0A  # a -> IA
RFI = 0x0B  # pop A; pop PC; disable queueing
IAQ = 0x0C  # interrupt queueing on if a != 0
HWN = 0x10  # number of devices -> a
HWQ = 0x11  # query device a
HWI = 0x12  # hardware interrupt to device a

# Operand codes
REG_IND = 0x07      # 0x00-0x06 register, 0x07-0x0D [register]
REG_OFF = 0x0E      # 0x0E-0x15 [register + next]
REG_OFF_END = 0x15
PUSH_POP = 0x18     # b: [--SP], a: [SP++]
PEEK = 0x19         # [SP]
PICK = 0x1A         # [SP + next]
SP = 0x1B
PC = 0x1C
EX = 0x1D
NEXT_IND = 0x1E     # [next]
NEXT_LIT = 0x1F     # next
LITERAL = 0x20      # 0x20-0x3F inline literal (a only)
LITERAL_END = 0x3F
