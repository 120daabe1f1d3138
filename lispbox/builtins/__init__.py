"""Built-in functions of the Lisp, one module per category."""