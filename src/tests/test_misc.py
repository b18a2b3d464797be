import io
import os
import tempfile
import logging

import numpy

from pyknapsack.misc import (_is_number,
                             _cast_to_integral,
                             time_format,
                             format_fraction,
                             as_stream,
                             get_simple_logger)

class Test(object):

    def test_is_number(self):
        assert _is_number(1)
        assert _is_number(1.5)
        assert _is_number(numpy.int32(2))
        assert _is_number(numpy.float64(2.5))
        assert not _is_number(True)
        assert not _is_number(False)
        assert not _is_number("1")
        assert not _is_number(None)

    def test_cast_to_integral(self):
        assert _cast_to_integral(10) == 10
        assert type(_cast_to_integral(10.0)) is int
        assert _cast_to_integral(10.0) == 10
        assert _cast_to_integral(numpy.int16(7)) == 7
        assert _cast_to_integral(2.5) is None
        assert _cast_to_integral(float("inf")) is None
        assert _cast_to_integral(float("nan")) is None
        assert _cast_to_integral(True) is None
        assert _cast_to_integral("3") is None

    def test_time_format(self):
        assert time_format(None) == "<unknown>"
        assert time_format(0) == "0.0 s"
        assert time_format(0, align_unit=True) == "0.0 s "
        assert time_format(0.002) == "2.0 ms"
        assert time_format(2001) == "33.4 m"
        assert time_format(60*60*2) == "2.0 h"
        assert time_format(60*60*24*3) == "3.0 d"

    def test_format_fraction(self):
        assert format_fraction(2.0/3) == "0.67"
        assert format_fraction(0.6) == "0.60"
        assert format_fraction(0.5, digits=3) == "0.500"
        assert format_fraction(0.25, digits=0) == "0"

    def test_as_stream(self):
        fid, fname = tempfile.mkstemp()
        os.close(fid)
        try:
            with as_stream(fname) as f:
                assert not f.closed
                f.write("hello")
            assert f.closed
            with open(fname) as f:
                assert f.read() == "hello"
            out = io.StringIO()
            with as_stream(out) as f:
                assert f is out
            assert not out.closed
        finally:
            os.remove(fname)

    def test_get_simple_logger(self):
        log = get_simple_logger(console=False)
        assert log.disabled
        log = get_simple_logger()
        assert not log.disabled
        out = io.StringIO()
        log = get_simple_logger(stream=out,
                                console=False,
                                level=logging.DEBUG)
        log.debug("debug")
        log.info("info")
        assert out.getvalue() == "debug\ninfo\n"
        out = io.StringIO()
        formatter = logging.Formatter("[%(levelname)s] %(message)s")
        log = get_simple_logger(stream=out,
                                console=False,
                                level=logging.WARNING,
                                formatter=formatter)
        log.info("info")
        log.warning("warning")
        assert out.getvalue() == "[WARNING] warning\n"
        fid, fname = tempfile.mkstemp()
        os.close(fid)
        try:
            log = get_simple_logger(filename=fname,
                                    console=False)
            log.info("to file")
            for h in log.handlers:
                h.close()
            with open(fname) as f:
                assert f.read() == "to file\n"
        finally:
            os.remove(fname)
