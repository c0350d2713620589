import time


class EndOfInput(Exception):
	pass

def split_line(line):
	line = line.strip()
	#`#` starts a comment
	index = line.find("#")
	if index != -1: line=line[:index]
	return line.split()

class TokenStream(object):
	#`source`, if given, is an iterable of lines read lazily whenever the stack runs dry
	def __init__(self, source=None):
		self.rev_tokens = []
		if source is None: self._source=None
		else:              self._source=iter(source)

	def add_tokens_at_current(self, tokens):
		self.rev_tokens += reversed(tokens)
	def add_tokens_at_end(self, tokens):
		self.rev_tokens[0:0] = reversed(tokens)

	def _fill(self, n):
		while len(self.rev_tokens) < n and self._source is not None:
			line = next(self._source, None)
			if line is None:
				self._source = None
			else:
				self.add_tokens_at_end(split_line(line))
		if len(self.rev_tokens) < n:
			raise EndOfInput("Expected %d more token(s), got %d"%(n,len(self.rev_tokens)))

	#Buffered tokens are only ever the rest of the last line read
	def discard_line(self):
		self.rev_tokens = []

	def peek(self):
		self._fill(1)
		return self.rev_tokens[-1]
	def pop_next(self, n=1):
		self._fill(n)

		tokens = list(reversed(self.rev_tokens[-n:]))

		for i in range(n): self.rev_tokens.pop()

		if n == 1: return tokens[0]
		else:      return list(tokens)

	def at_end(self):
		try:
			self._fill(1)
		except EndOfInput:
			return True
		return False

	#Tokens already buffered; lines not yet read from `source` are not counted
	def __len__(self):
		return len(self.rev_tokens)

def tokenize(lines, verbose=False):
	if verbose: print("  Tokenizing %d lines . . ."%len(lines))

	t0 = time.time()
	tokens = []
	for i in range(len(lines)):
		tokens += split_line(lines[i])
		if verbose and i % 1000 == 0:
			print("\r  Tokenized line %d / %d . . ."%(i+1,len(lines)),end="")

	tokenstream = TokenStream()
	tokenstream.add_tokens_at_current(tokens)

	t1 = time.time()
	if verbose: print("\r  Tokenized %d lines in %f seconds."%(len(lines),t1-t0))

	return tokenstream
