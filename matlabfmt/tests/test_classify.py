import unittest

from matlabfmt.engine.classify import Category, classify


class ClassifyTest(unittest.TestCase):

    def test_ignore(self):
        cl = classify('  import pkg.*')
        self.assertIs(cl.category, Category.IGNORE)
        self.assertEqual(cl.body, 'import pkg.*')
        self.assertIs(classify('clear all').category, Category.IGNORE)
        self.assertIs(classify('clearvars x').category, Category.IGNORE)

    def test_one_line(self):
        cl = classify('for i=1:3, x(i)=i; end')
        self.assertIs(cl.category, Category.ONE_LINE)
        self.assertEqual(cl.keyword, 'for')
        self.assertEqual(cl.body, ' i=1:3, x(i)=i; ')
        self.assertEqual(cl.closer, 'end')
        self.assertEqual(cl.trailing, '')

        cl = classify('if x, y=1; end; z=2;')
        self.assertIs(cl.category, Category.ONE_LINE)
        self.assertEqual(cl.closer, 'end;')
        self.assertEqual(cl.trailing, ' z=2;')

    def test_function(self):
        cl = classify('function y=foo(x)')
        self.assertIs(cl.category, Category.FUNCTION)
        self.assertEqual(cl.keyword, 'function')
        self.assertEqual(cl.body, ' y=foo(x)')
        self.assertIs(classify('classdef Foo').category, Category.FUNCTION)

    def test_control(self):
        for line in ['if x>0', 'while true', 'for k = 1:n', 'parfor k=1:n',
                     'try', 'methods (Access = private)', 'properties',
                     'events', 'arguments', 'enumeration', 'spmd']:
            self.assertIs(classify(line).category, Category.CONTROL, line)

        cl = classify('  if x>0')
        self.assertEqual(cl.keyword, 'if')
        self.assertEqual(cl.body, ' x>0')

    def test_switch(self):
        cl = classify('switch x')
        self.assertIs(cl.category, Category.SWITCH)
        self.assertEqual(cl.body, ' x')

    def test_continuation(self):
        for line in ['else', 'elseif x<0', 'case 1', "case {'a', 'b'}",
                     'otherwise', 'catch err']:
            self.assertIs(
                classify(line).category, Category.CONTINUATION, line
            )

    def test_closer(self):
        cl = classify('  end')
        self.assertIs(cl.category, Category.CLOSER)
        self.assertEqual(cl.keyword, 'end')
        self.assertEqual(cl.body, '')

        cl = classify('end; % done')
        self.assertIs(cl.category, Category.CLOSER)
        self.assertEqual(cl.keyword, 'end;')
        self.assertEqual(cl.body, ' % done')

        for line in ['endfunction', 'endif', 'endwhile', 'endfor',
                     'endswitch']:
            self.assertIs(classify(line).category, Category.CLOSER, line)

    def test_statement(self):
        for line in ['x = 1;', 'endpoint = 3;', 'iffy(2)', 'format long',
                     'x(end) = 1;', 'functions = {};']:
            cl = classify(line)
            self.assertIs(cl.category, Category.STATEMENT, line)
            self.assertEqual(cl.body, line)


if __name__ == '__main__':
    unittest.main()
