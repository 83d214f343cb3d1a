from goofy_animals.cli import main

main(prog_name='goofy-animals')
