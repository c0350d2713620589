import argparse
import os, sys
import time

from commands import Command, CAPTIONS, MENU, dispatch, parse_choice, write_result
from matrix import MatrixError
import tokenizer


def run_interactive(tokenstream, out):
	def prompt(text):
		if text.endswith(": "): out.write(text)
		else:                   out.write(text+"\n")
		out.flush()

	while True:
		out.write(MENU)
		out.flush()
		try:
			token = tokenstream.pop_next()
		except tokenizer.EndOfInput:
			out.write("\n")
			break

		try:
			command = parse_choice(token, Command)
		except ValueError:
			out.write("Unknown choice: %s\n\n"%token)
			continue
		if command == Command.EXIT:
			break

		try:
			result = dispatch(command, tokenstream, prompt)
		except tokenizer.EndOfInput:
			out.write("\n")
			break
		except (MatrixError,ValueError) as e:
			out.write("ERROR: %s\n"%e)
			tokenstream.discard_line()
		else:
			out.write(CAPTIONS[command]+"\n")
			write_result(out, result)
		out.write("\n")

def evaluate_tokens(tokenstream, file):
	num_commands = 0
	while not tokenstream.at_end():
		command = parse_choice(tokenstream.pop_next(), Command)
		if command == Command.EXIT:
			break
		result = dispatch(command, tokenstream)
		file.write(CAPTIONS[command]+"\n")
		write_result(file, result)
		num_commands += 1
	return num_commands

def evaluate(path_in):
	path_out = os.path.splitext(path_in)[0] + ".out"

	path_in  = os.path.abspath(path_in ).replace("\\","/")
	path_out = os.path.abspath(path_out).replace("\\","/")

	print("Reading input file . . .")
	t0 = time.time()
	with open(path_in,"r") as file:
		lines = file.readlines()
	t1 = time.time()
	print("Read input file in %f seconds."%(t1-t0))

	print("Evaluating commands . . .")
	t0 = time.time()
	tokenstream = tokenizer.tokenize(lines, verbose=True)
	with open(path_out,"w") as file:
		num_commands = evaluate_tokens(tokenstream, file)
	t1 = time.time()
	print("Evaluated %d commands in %f seconds."%(num_commands,t1-t0))
	print("Wrote output file \"%s\"."%path_out)

	return path_out

def main(argv=None):
	parser = argparse.ArgumentParser(prog="matrix-processor", description="Numeric matrix processor")
	parser.add_argument(
		"paths", nargs="*",
		help="command scripts to evaluate in batch mode; results go to <script>.out (omit for the interactive menu)"
	)
	args = parser.parse_args(argv)

	if len(args.paths) == 0:
		run_interactive(tokenizer.TokenStream(sys.stdin), sys.stdout)
	else:
		for path_in in args.paths:
			evaluate(path_in)

if __name__ == "__main__": main()
