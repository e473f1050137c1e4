"""Shared fixtures for nodelist tests."""

import os
import tempfile

import pytest

NODELIST_TEXT = """;A FidoNet Nodelist for Friday, January 5, 2024 -- Day number 005 : 12345
;
;S This list is for testing only,a,b,c,d,e,f,g
Zone,1,Test_Zone,Testville,John_Doe,-Unpublished-,0,CM
,2,Zone_Node,Testville,Jane_Roe,-Unpublished-,2400,CM
Region,10,Test_Region,Region_City,Rex_Ruler,-Unpublished-,300,CM,INA:region.example
,5,Test_Node,Node_City,Ned_Node,1-555-0100,9600,XX
Pvt,7,Private_Node,Node_City,Pat_Private,-Unpublished-,9600,CM,MO

Host,20,Test_Host,Host_City,Hal_Host,-Unpublished-,300,CM
Hold,1,Held_Node,Host_City,Hank_Hold,1-555-0101,33600,V34,IBN:24554
Zone,2,Second_Zone,Europe,Zed_Zone,-Unpublished-,0,CM
Region,50,Russia,Moscow,Ivan_Ivanov,-Unpublished-,300,CM
,1,Node_One,Moscow,Olga_Node,7-495-0000000,9600,CM,IBN
\x1a"""


@pytest.fixture
def nodelist_text():
    return NODELIST_TEXT


@pytest.fixture
def nodelist_file():
    """Create a temporary nodelist file with DOS line endings."""
    fd, path = tempfile.mkstemp(suffix=".005")
    with os.fdopen(fd, "wb") as f:
        f.write(NODELIST_TEXT.replace("\n", "\r\n").encode("cp437"))
    yield path
    os.unlink(path)
