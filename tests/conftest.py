"""Pytest fixtures for Native XML Tools tests."""

import pytest
from lxml import etree

SAMPLE_NATIVE_XML = """<?xml version="1.0" encoding="utf-8"?>
<articles xmlns="http://pkp.sfu.ca" xmlns:xlink="http://www.w3.org/1999/xlink">
  <article locale="en" date_submitted="2024-01-10" status="3" submission_progress="" current_publication_id="1" stage="production">
    <id type="internal" advice="ignore">10</id>
    <submission_file id="100" file_id="1000" stage="proof" viewable="true" genre="Article Text" uploader="jdoe">
      <name locale="en">article.pdf</name>
      <file id="999" filesize="10" extension="pdf">
        <embed encoding="base64">AA==</embed>
      </file>
      <file id="1000" filesize="12" extension="pdf">
        <embed encoding="base64">AAA=</embed>
      </file>
    </submission_file>
    <submission_file id="101" file_id="1001" stage="dependent" viewable="true" genre="Image" uploader="jdoe">
      <name locale="fr_CA">figure.png</name>
      <file id="1001" filesize="20" extension="png">
        <embed encoding="base64">AA==</embed>
      </file>
      <submission_file_ref id="100"/>
    </submission_file>
    <submission_file id="102" file_id="1002" stage="proof" viewable="true" genre="Data Set" uploader="jdoe">
      <name locale="en">draft.pdf</name>
      <file id="1002" filesize="30" extension="pdf">
        <embed encoding="base64">AA==</embed>
      </file>
    </submission_file>
    <submission_file id="103" file_id="1003" stage="dependent" viewable="true" genre="Other" uploader="jdoe">
      <name locale="en">draft-figure.png</name>
      <file id="1003" filesize="40" extension="png">
        <embed encoding="base64">AA==</embed>
      </file>
      <submission_file_ref id="102"/>
    </submission_file>
    <publication locale="en" version="1" status="1" seq="0">
      <id type="internal" advice="ignore">2</id>
      <title locale="en">Draft Paper</title>
      <title locale="de_DE">Entwurf</title>
      <authors>
        <author include_in_browse="true" user_group_ref="Author" seq="0" id="7">
          <givenname locale="en">Ana</givenname>
        </author>
      </authors>
      <article_galley locale="en" approved="false">
        <id type="internal" advice="ignore">5</id>
        <name locale="en">PDF</name>
        <seq>0</seq>
        <submission_file_ref id="102"/>
      </article_galley>
    </publication>
    <publication locale="en" version="2" status="3" seq="0">
      <id type="internal" advice="ignore">1</id>
      <id type="doi" advice="update">10.1234/abc</id>
      <title locale="en">Test Paper</title>
      <title locale="es_ES">Documento de prueba</title>
      <authors>
        <author include_in_browse="true" user_group_ref="Author" seq="0" id="8">
          <givenname locale="en">Ana</givenname>
        </author>
        <author include_in_browse="true" user_group_ref="Translator" seq="1" id="9">
          <givenname locale="en">Bruno</givenname>
        </author>
      </authors>
      <article_galley locale="en" approved="false">
        <id type="internal" advice="ignore">6</id>
        <name locale="en">PDF</name>
        <seq>0</seq>
        <submission_file_ref id="100"/>
      </article_galley>
    </publication>
  </article>
</articles>
"""

SECOND_NATIVE_XML = """<?xml version="1.0" encoding="utf-8"?>
<articles xmlns="http://pkp.sfu.ca">
  <article locale="pt_BR" current_publication_id="20">
    <id type="internal" advice="ignore">11</id>
    <submission_file id="200" file_id="2000" genre="Article Text" uploader="maria">
      <name locale="pt_BR">artigo.pdf</name>
      <file id="2000" filesize="10" extension="pdf"/>
    </submission_file>
    <submission_file id="201" file_id="2001" genre="Multimedia" uploader="maria">
      <name locale="en">video.mp4</name>
      <file id="2001" filesize="10" extension="mp4"/>
    </submission_file>
    <publication locale="pt_BR" version="1" status="3">
      <id type="internal" advice="ignore">20</id>
      <title locale="pt_BR">Artigo de teste</title>
      <article_galley locale="pt_BR">
        <id type="internal" advice="ignore">21</id>
        <submission_file_ref id="200"/>
      </article_galley>
      <article_galley locale="en">
        <id type="internal" advice="ignore">22</id>
        <submission_file_ref id="201"/>
      </article_galley>
    </publication>
  </article>
</articles>
"""


def parse_xml(content: str) -> etree._ElementTree:
    """Parse an XML string the way the tools parse input files."""
    parser = etree.XMLParser(huge_tree=True, ns_clean=True)
    return etree.ElementTree(etree.fromstring(content.encode("utf-8"), parser))


@pytest.fixture
def sample_native_xml():
    """Native XML export with one article, two publications and four submission files.

    Publication 1 is current and its galley references submission file 100.
    Submission file 101 depends on 100, while 102 (referenced only by the
    old publication 2) and its dependent 103 are orphaned. Submission file
    100 has two revisions, 999 and 1000; its file_id points to 1000.
    """
    return SAMPLE_NATIVE_XML


@pytest.fixture
def second_native_xml():
    """A second export, from another journal, with one publication."""
    return SECOND_NATIVE_XML


@pytest.fixture
def sample_document(sample_native_xml):
    """The sample export parsed into an lxml document."""
    return parse_xml(sample_native_xml)


@pytest.fixture
def sample_xml_file(tmp_path, sample_native_xml):
    """The sample export written to a file."""
    path = tmp_path / "export.xml"
    path.write_text(sample_native_xml, encoding="utf-8")
    return path


@pytest.fixture
def second_xml_file(tmp_path, second_native_xml):
    """The second export written to a file."""
    path = tmp_path / "export-2.xml"
    path.write_text(second_native_xml, encoding="utf-8")
    return path


@pytest.fixture
def parse_document():
    """Parse an XML string into an lxml document."""
    return parse_xml
