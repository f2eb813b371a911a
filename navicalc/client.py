# Client module
import sys
import json
import logging

from navicalc.errors import CalcError
from navicalc.evaluator import evaluate
from navicalc.util import format_number

CALC_EXIT_COMMANDS = ('quit', 'exit')

# Sem basicConfig (logenable=False) nada deve ir para a stderr
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

class Config:
    def __init__(self, configfile: str):
        self.kvalues = {}
        self.path = configfile
        self.load()

    def load(self):
        with open(self.path, 'r', encoding='utf-8') as f:
            self.kvalues = json.load(f)

    def get(self, keystr: str, default=None):
        keys = keystr.split('.')
        curr = self.kvalues

        try:
            for i in keys:
                curr = curr[i]
        except (KeyError, TypeError):
            return default

        return curr

class CalcApp:
    def __init__(self, input_stream=None, output_stream=None, prompt: str='> ', logenable: bool=False, logfile: str=None, loglevel=logging.INFO):
        self.input_stream = input_stream if input_stream else sys.stdin
        self.output_stream = output_stream if output_stream else sys.stdout
        self.prompt = prompt
        self.is_exiting = False

        # Log básico, não queremos nada "fancy"
        if logenable:
            logging.basicConfig(
                filename=logfile,
                format="[%(asctime)s] <%(levelname)s> %(message)s",
                datefmt="%d/%m/%Y %H:%M:%S",
                level=loglevel
            )

    @classmethod
    def from_config(cls, config: Config, input_stream=None, output_stream=None):
        return cls(
            input_stream=input_stream,
            output_stream=output_stream,
            prompt=config.get('prompt', '> '),
            logenable=config.get('logging.enabled', False),
            logfile=config.get('logging.file'),
            loglevel=logging.getLevelName(str(config.get('logging.level', 'INFO')).upper())
        )

    def write(self, msg: str, newline: bool=True):
        self.output_stream.write(f'{msg}\n' if newline else msg)
        self.output_stream.flush()

    def run(self):
        self.write('Welcome to Calc!')
        self.write(f"Enter mathematical expressions to evaluate (or '{CALC_EXIT_COMMANDS[0]}' to exit)")

        try:
            while not self.is_exiting:
                self.write(self.prompt, newline=False)
                line = self.input_stream.readline()

                # Fim da stream (Ctrl-D ou arquivo acabou)
                if not line:
                    break

                self.handle_receive_command(line.strip())
        except KeyboardInterrupt:
            log.info('KeyboardInterrupt received, exiting...')
            self.write('')

        self.write('Goodbye!')

    def handle_receive_command(self, command_string: str):
        if command_string in CALC_EXIT_COMMANDS:
            self.is_exiting = True
        elif command_string:
            self.write(self.evaluate_expression(command_string)[1])

    def evaluate_expression(self, expression: str):
        log.info(f'Evaluating expression: {expression}')

        try:
            result = evaluate(expression)
        except CalcError as e:
            log.warning(f'Expression `{expression}` threw an error: {type(e).__name__}: {e}')
            return False, f'Error: {e}'

        return True, f'= {format_number(result)}'
