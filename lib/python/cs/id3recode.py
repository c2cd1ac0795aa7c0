#!/usr/bin/env python3
#
# Recode legacy Shift_JIS text in ID3v2.3 tags as UTF-8.
#

''' Rewrite the ID3v2.3 tag at the front of an MP3 file,
    recoding the title (`TIT2`), album (`TALB`)
    and lead performer (`TPE1`) text frames from Shift_JIS to UTF-8.

    Many older Japanese taggers stored Shift_JIS text in frames
    marked with encoding byte `0x00`, which ID3 defines as ISO8859-1.
    Players then show mojibake. This module decodes such frames
    as Shift_JIS and rewrites them with encoding byte `0x03` (UTF-8).
    Everything else in the file, other frames, padding and the audio data,
    is copied through unchanged
    and the tag size in the header is corrected to suit.

    Only plain ID3v2.3 tags are handled:
    tags with unsynchronisation, an extended header,
    the experimental flag or a footer are refused,
    as are recodable frames which are compressed, encrypted
    or unsynchronised.

    The main entry points are:
    * `recode_stream(bfr, f)`: recode from a `CornuCopyBuffer` to a seekable binary file
    * `recode_bytes(bs)`: recode a `bytes` and return the new `bytes`
    * `recode_file(srcpath, dstpath)`: recode one file to another,
      returning a `RecodeResult`
    * `recode_path(path)`: recode a file via a temporary file
      and replace the original on success

    Example:

        >>> title = 'テスト'.encode('cp932')
        >>> frame = b'TIT2' + bytes([0, 0, 0, 1 + len(title), 0, 0]) + b'\\0' + title
        >>> tag = b'ID3\\3\\0\\0' + bytes([0, 0, 0, len(frame)]) + frame
        >>> recoded = recode_bytes(tag + b'audio')
        >>> recoded[20:]
        b'\\x03\\xe3\\x83\\x86\\xe3\\x82\\xb9\\xe3\\x83\\x88audio'
'''

from contextlib import closing
from dataclasses import dataclass, field
from getopt import GetoptError
from io import BytesIO
import os
from os import SEEK_END, rename
from os.path import (
    abspath,
    basename,
    exists as existspath,
    isdir as isdirpath,
    join as joinpath,
    splitext,
)
import sys
from tempfile import gettempdir
from typing import List, Optional

from cs.binary import BinarySingleValue, SimpleBinary, UInt16BE, UInt32BE
from cs.buffer import CornuCopyBuffer
from cs.cmdutils import BaseCommand
from cs.fileutils import atomic_filename, copy_data
from cs.logutils import debug, error, info, warning
from cs.pfx import Pfx, pfx_call

__version__ = '20261019'

DISTINFO = {
    'description':
    "Recode Shift_JIS ID3v2.3 title/album/artist frames as UTF-8.",
    'keywords': ["python3"],
    'classifiers': [
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Multimedia :: Sound/Audio",
    ],
    'install_requires': [
        'cs.binary',
        'cs.buffer',
        'cs.cmdutils',
        'cs.fileutils',
        'cs.logutils',
        'cs.pfx',
    ],
    'entry_points': {
        'console_scripts': {
            'id3recode': 'cs.id3recode:main'
        },
    },
}

# the codec for the legacy text, Shift_JIS as Windows writes it
LEGACY_ENCODING = 'cp932'

# the frames we recode: title, album, lead performer
RECODE_FRAME_IDS = (b'TIT2', b'TALB', b'TPE1')

MP3_EXT = '.mp3'

# environment variable overriding the default temporary directory
TMPDIR_ENVVAR = 'ID3RECODE_TMPDIR'

# offset of the tag size field: after b'ID3', the version and the flags
SIZE_OFFSET = 6

# ID3v2.3 tag header flags
TAG_FLAG_UNSYNCHRONISATION = 0x80
TAG_FLAG_EXTENDED_HEADER = 0x40
TAG_FLAG_EXPERIMENTAL = 0x20
TAG_FLAG_FOOTER = 0x10
TAG_FLAGS_UNSUPPORTED = (
    TAG_FLAG_UNSYNCHRONISATION | TAG_FLAG_EXTENDED_HEADER
    | TAG_FLAG_EXPERIMENTAL | TAG_FLAG_FOOTER
)

# bits of the second frame flags byte which we refuse in recodable frames
FRAME_FLAG_COMPRESSED = 0x08
FRAME_FLAG_ENCRYPTED = 0x04
FRAME_FLAG_UNSYNCHRONISED = 0x02
FRAME_FLAGS_UNSUPPORTED = (
    FRAME_FLAG_COMPRESSED | FRAME_FLAG_ENCRYPTED | FRAME_FLAG_UNSYNCHRONISED
)

# text frame encoding bytes
ENCODING_LEGACY = 0x00
ENCODING_UTF16 = 0x01
ENCODING_UTF16BE = 0x02
ENCODING_UTF8 = 0x03
TEXT_ENCODING_NAMES = {
    ENCODING_LEGACY: 'iso8859-1',
    ENCODING_UTF16: 'utf-16',
    ENCODING_UTF16BE: 'utf-16-be',
    ENCODING_UTF8: 'utf-8',
}

def main(argv=None):
  ''' Command line mode.
  '''
  return ID3RecodeCommand(argv).run()

class ID3RecodeError(Exception):
  ''' Base class for the errors which abort recoding of a file.
      The `kind` attribute names the error kind.
  '''

  kind = 'ID3RecodeError'

class InvalidSignatureError(ID3RecodeError, ValueError):
  ''' The data do not start with `b'ID3'`.
  '''

  kind = 'InvalidSignature'

class UnsupportedVersionError(ID3RecodeError, ValueError):
  ''' The tag major version is not 3.
  '''

  kind = 'UnsupportedVersion'

class UnsupportedHeaderFlagsError(ID3RecodeError, ValueError):
  ''' The tag header has a flag set which we do not handle.
  '''

  kind = 'UnsupportedHeaderFlags'

class UnsupportedFrameFlagsError(ID3RecodeError, ValueError):
  ''' A recodable frame is compressed, encrypted or unsynchronised.
  '''

  kind = 'UnsupportedFrameFlags'

class TagSizeOverflowError(ID3RecodeError, ValueError):
  ''' The recoded tag body is too large for the 28 bit size field.
  '''

  kind = 'TagSizeOverflow'

class TruncatedInputError(ID3RecodeError, EOFError):
  ''' The input ended before a complete read.
  '''

  kind = 'TruncatedInput'

class IOFailureError(ID3RecodeError, OSError):
  ''' A read, write or seek failed.
  '''

  kind = 'IOFailure'

class ID3V2Size(BinarySingleValue, value_type=int):
  ''' An ID3v2 size field,
      a big endian 4 byte field of 7-bit values, high bit 0.

      Parsing ignores the high bits; transcription always clears them.
  '''

  MAX_VALUE = (1 << 28) - 1

  TEST_CASES = (
      (0, b'\0\0\0\0'),
      (127, b'\0\0\0\x7f'),
      (128, b'\0\0\1\0'),
      (257, b'\0\0\2\1'),
      (16384, b'\0\1\0\0'),
      ((1 << 28) - 1, b'\x7f\x7f\x7f\x7f'),
  )

  @staticmethod
  def decode_bytes(size_bs) -> int:
    ''' Decode 4 synchsafe bytes as an `int`.

        >>> ID3V2Size.decode_bytes(b'\\0\\0\\2\\1')
        257
        >>> ID3V2Size.decode_bytes(b'\\x80\\x80\\x82\\x81')
        257
    '''
    return (
        (size_bs[0] & 0x7f) << 21
        | (size_bs[1] & 0x7f) << 14
        | (size_bs[2] & 0x7f) << 7
        | (size_bs[3] & 0x7f)
    )

  @classmethod
  def parse_value(cls, bfr) -> int:
    ''' Read an ID3V2 size field from `bfr`, return the size.
    '''
    return cls.decode_bytes(bfr.take(4))

  # pylint: disable=arguments-renamed
  @staticmethod
  def transcribe_value(size: int) -> bytes:
    ''' Transcribe a size in ID3v2 format.
    '''
    if not 0 <= size <= ID3V2Size.MAX_VALUE:
      raise ValueError("size %d out of range" % (size,))
    return bytes(
        [
            (size >> 21) & 0x7f,
            (size >> 14) & 0x7f,
            (size >> 7) & 0x7f,
            size & 0x7f,
        ]
    )

class ID3V23TagHeader(SimpleBinary):
  ''' The 10 byte ID3v2.3 tag header:
      `b'ID3'`, major and minor version, flags, synchsafe body size.

      Parsing validates the header and raises:
      * `InvalidSignatureError` if the data do not start with `b'ID3'`
      * `UnsupportedVersionError` if the major version is not 3
      * `UnsupportedHeaderFlagsError` if any of the unsynchronisation,
        extended header, experimental or footer flags are set
      The minor version is kept but not checked.
  '''

  length = 10

  @classmethod
  def parse(cls, bfr):
    ''' Parse and validate an ID3v2.3 tag header from `bfr`.
    '''
    self = cls()
    # pylint: disable=attribute-defined-outside-init
    signature = bfr.take(3)
    if signature != b'ID3':
      raise InvalidSignatureError("expected b'ID3', found %r" % (signature,))
    self.v1, self.v2 = bfr.take(2)
    if self.v1 != 3:
      raise UnsupportedVersionError(
          "unsupported version 2.%d.%d, expected 2.3" % (self.v1, self.v2)
      )
    self.flags = bfr.byte0()
    if self.flags & TAG_FLAGS_UNSUPPORTED:
      raise UnsupportedHeaderFlagsError(
          "unsupported flags 0x%02x" % (self.flags & TAG_FLAGS_UNSUPPORTED,)
      )
    self.body_size = ID3V2Size.parse_value(bfr)
    return self

  def transcribe(self):
    ''' Transcribe the tag header.
    '''
    yield b'ID3'
    yield bytes([self.v1, self.v2, self.flags])
    yield ID3V2Size.transcribe_value(self.body_size)

class ID3V23FrameHeader(SimpleBinary):
  ''' The 10 byte header of an ID3v2.3 frame:
      4 byte frame id, big endian 4 byte size, 2 byte flags.

      The size is a plain big endian value, not synchsafe.
  '''

  length = 10

  @classmethod
  def parse(cls, bfr):
    ''' Parse a frame header from `bfr`.
        No validation happens here; see `.is_valid`.
    '''
    self = cls()
    # pylint: disable=attribute-defined-outside-init
    self.frame_id = bfr.take(4)
    self.size = UInt32BE.parse_value(bfr)
    self.flags = UInt16BE.parse_value(bfr)
    return self

  def transcribe(self):
    yield self.frame_id
    yield UInt32BE.transcribe_value(self.size)
    yield UInt16BE.transcribe_value(self.flags)

  @property
  def frame_id_s(self):
    ''' The frame id as a `str`, for messages.
    '''
    return self.frame_id.decode('ascii', errors='replace')

  @property
  def is_valid(self):
    ''' Whether the frame id consists of 4 uppercase letters or digits.
        An invalid id marks the start of the padding,
        or some data we should not try to interpret.
    '''
    return is_valid_frame_id(self.frame_id)

  @property
  def is_recodable(self):
    ''' Whether this frame is one we recode.
    '''
    return self.frame_id in RECODE_FRAME_IDS

  def check_flags(self):
    ''' Raise `UnsupportedFrameFlagsError` if this frame is compressed,
        encrypted or unsynchronised.
    '''
    bad_flags = self.flags & FRAME_FLAGS_UNSUPPORTED
    if bad_flags:
      raise UnsupportedFrameFlagsError(
          "unsupported frame flags 0x%02x" % (bad_flags,)
      )

def is_valid_frame_id(frame_id: bytes) -> bool:
  ''' Test whether `frame_id` is 4 bytes of `A`-`Z` or `0`-`9`.

      >>> is_valid_frame_id(b'TIT2')
      True
      >>> is_valid_frame_id(b'Tit2')
      False
      >>> is_valid_frame_id(b'\\0\\0\\0\\0')
      False
  '''
  return len(frame_id) == 4 and all(
      0x41 <= b <= 0x5a or 0x30 <= b <= 0x39 for b in frame_id
  )

def decode_legacy(bs, encoding=LEGACY_ENCODING) -> Optional[str]:
  ''' Decode `bs` as `encoding` (default `LEGACY_ENCODING`).
      Return the text, or `None` if `bs` is not valid in that encoding.
  '''
  try:
    return bytes(bs).decode(encoding)
  except UnicodeDecodeError as e:
    debug("not %s: %s", encoding, e)
    return None

def transcode_text(body, encoding=LEGACY_ENCODING) -> Optional[bytes]:
  ''' Return the recoded text frame body for the frame body `body`,
      or `None` if the frame should be left alone.

      A body whose encoding byte is `ENCODING_LEGACY`
      and whose text decodes as `encoding`
      is rewritten as `ENCODING_UTF8` followed by the UTF-8 text.
      Empty bodies, other encodings and undecodable text
      are left alone.
  '''
  if not body or body[0] != ENCODING_LEGACY:
    return None
  text = decode_legacy(body[1:], encoding)
  if text is None:
    return None
  return bytes([ENCODING_UTF8]) + text.encode('utf-8')

def walk_frames(bfr, body_size: int):
  ''' A generator yielding `ID3V23FrameHeader`s from `bfr`
      for a tag body of `body_size` bytes.

      The consumer must consume exactly `frame_header.size` bytes
      of frame body from `bfr` before resuming the generator
      unless the header is not `.is_valid`.
      A header with an invalid frame id is the start of the padding:
      it is yielded and the walk stops.
  '''
  consumed = 0
  while consumed < body_size:
    frame_header = ID3V23FrameHeader.parse(bfr)
    yield frame_header
    if not frame_header.is_valid:
      break
    consumed += frame_header.length + frame_header.size

@dataclass
class RecodeStats:
  ''' Accounting for a single tag rewrite.
  '''
  header: Optional[ID3V23TagHeader] = None
  body_size: int = 0
  delta: int = 0
  nframes: int = 0
  recoded: List[bytes] = field(default_factory=list)
  padding_offset: Optional[int] = None

  @property
  def final_body_size(self):
    ''' The body size written to the new tag header.
    '''
    return self.body_size + self.delta

def recode_frame(frame_header, body, f, encoding=LEGACY_ENCODING):
  ''' Write the recodable frame `frame_header`+`body` to `f`,
      recoded if it is legacy text.
      Return the change in the frame size,
      or `None` if the frame was written unchanged.
  '''
  new_body = transcode_text(body, encoding)
  if new_body is None:
    f.write(bytes(frame_header))
    f.write(body)
    return None
  new_header = ID3V23FrameHeader(
      frame_id=frame_header.frame_id,
      size=len(new_body),
      flags=frame_header.flags,
  )
  f.write(bytes(new_header))
  f.write(new_body)
  return new_header.size - frame_header.size

def _recode_stream(bfr, f, encoding):
  stats = RecodeStats()
  header = stats.header = ID3V23TagHeader.parse(bfr)
  stats.body_size = header.body_size
  # the size field is provisional, patched below
  f.write(bytes(header))
  for frame_header in walk_frames(bfr, header.body_size):
    frame_offset = bfr.offset - frame_header.length
    if not frame_header.is_valid:
      debug("padding at offset %d", frame_offset)
      stats.padding_offset = frame_offset
      f.write(bytes(frame_header))
      break
    stats.nframes += 1
    with Pfx(frame_header.frame_id_s):
      if frame_header.is_recodable:
        frame_header.check_flags()
        body = bfr.take(frame_header.size)
        delta = recode_frame(frame_header, body, f, encoding)
        if delta is not None:
          stats.recoded.append(frame_header.frame_id)
          stats.delta += delta
      else:
        f.write(bytes(frame_header))
        # raises EOFError if the body is short
        bfr.skip(frame_header.size, copy_skip=f.write)
  # copy the audio data and anything else
  for bs in bfr:
    f.write(bs)
  f.flush()
  if not 0 <= stats.final_body_size <= ID3V2Size.MAX_VALUE:
    raise TagSizeOverflowError(
        "recoded tag body size %d does not fit in 28 bits" %
        (stats.final_body_size,)
    )
  f.seek(SIZE_OFFSET)
  f.write(ID3V2Size.transcribe_value(stats.final_body_size))
  f.seek(0, SEEK_END)
  f.flush()
  return stats

def recode_stream(bfr, f, encoding=LEGACY_ENCODING) -> RecodeStats:
  ''' Recode the ID3v2.3 tag from the `CornuCopyBuffer` `bfr`
      onto the seekable binary file `f`, then copy the remaining data.
      Return a `RecodeStats`.

      The output starts at the current position of `f`,
      which is expected to be 0.
      The tag size field in `f` is patched after all the data are written.

      Raises an `ID3RecodeError` subclass on failure,
      in which case the contents of `f` should be discarded.
  '''
  try:
    return _recode_stream(bfr, f, encoding)
  except EOFError as e:
    raise TruncatedInputError("truncated input: %s" % (e,)) from e
  except OSError as e:
    raise io_failure(e) from e

def io_failure(e: OSError) -> IOFailureError:
  ''' Return an `IOFailureError` wrapping the `OSError` `e`.
  '''
  if isinstance(e, IOFailureError):
    return e
  failure = IOFailureError(e.errno, "I/O failure: %s" % (e,))
  failure.__cause__ = e
  return failure

def recode_bytes(bs, encoding=LEGACY_ENCODING) -> bytes:
  ''' Recode the MP3 data `bs`, return the new data.
  '''
  f = BytesIO()
  recode_stream(CornuCopyBuffer.from_bytes(bs), f, encoding)
  return f.getvalue()

@dataclass
class RecodeResult:
  ''' The outcome of recoding a single file.
  '''
  path: str
  error: Optional[ID3RecodeError] = None
  stats: Optional[RecodeStats] = None

  def __bool__(self):
    return self.ok

  @property
  def ok(self):
    ''' Whether the recode succeeded.
    '''
    return self.error is None

  @property
  def kind(self):
    ''' The error kind, or `None` on success.
    '''
    return None if self.error is None else self.error.kind

def recode_file(srcpath, dstpath, encoding=LEGACY_ENCODING) -> RecodeResult:
  ''' Recode the file `srcpath` to `dstpath`, return a `RecodeResult`.

      This does not raise for per file failures;
      these are recorded in the result's `.error`.
      On failure the contents of `dstpath` are incomplete.
  '''
  with Pfx(srcpath):
    try:
      with closing(CornuCopyBuffer.from_filename(srcpath)) as bfr:
        with open(dstpath, 'wb') as f:
          stats = recode_stream(bfr, f, encoding)
    except ID3RecodeError as e:
      return RecodeResult(path=srcpath, error=e)
    except OSError as e:
      return RecodeResult(path=srcpath, error=io_failure(e))
    return RecodeResult(path=srcpath, stats=stats)

def mp3_paths(path, ext=MP3_EXT):
  ''' Yield the MP3 file paths for `path`:
      `path` itself if it is not a directory,
      otherwise the non-directory entries within it ending in `ext`
      (default `MP3_EXT`), in lexical order.
      This does not recurse.

      Raises `OSError` if `path` does not exist.
  '''
  pfx_call(os.stat, path)
  if not isdirpath(path):
    yield path
    return
  for base in sorted(pfx_call(os.listdir, path)):
    if splitext(base)[1] != ext:
      continue
    subpath = joinpath(path, base)
    if isdirpath(subpath):
      continue
    yield subpath

def default_tmpdir():
  ''' The default directory for temporary output files:
      `$ID3RECODE_TMPDIR` or `tempfile.gettempdir()`.
  '''
  return os.environ.get(TMPDIR_ENVVAR) or gettempdir()

def tmp_path_for(path, tmpdir=None):
  ''' Return the temporary output path for the input `path`:
      its absolute path with each `/` replaced by `!`,
      in `tmpdir` (default from `default_tmpdir()`).

      >>> tmp_path_for('/music/a.mp3', '/tmp')
      '/tmp/!music!a.mp3'
  '''
  if tmpdir is None:
    tmpdir = default_tmpdir()
  return joinpath(tmpdir, abspath(path).replace(os.sep, '!'))

def replace_file(srcpath, dstpath):
  ''' Move `srcpath` to `dstpath`, replacing `dstpath`.

      This tries `os.rename` first.
      If that fails, for example across filesystems,
      the data are copied to a temporary file beside `dstpath`,
      checked for size, and renamed into place;
      only then is `srcpath` removed.
  '''
  try:
    pfx_call(rename, srcpath, dstpath)
  except OSError as e:
    info("rename %r => %r fails (%s), copying", srcpath, dstpath, e)
  else:
    return
  src_size = pfx_call(os.stat, srcpath).st_size
  with pfx_call(open, srcpath, 'rb') as srcf:
    with atomic_filename(dstpath, exists_ok=True) as T:
      copied = copy_data(srcf, T, None)
      T.flush()
      if copied != src_size:
        raise OSError(
            "copied %d bytes from %r, expected %d" %
            (copied, srcpath, src_size)
        )
  pfx_call(os.remove, srcpath)

def recode_path(
    path, tmpdir=None, doit=True, encoding=LEGACY_ENCODING
) -> RecodeResult:
  ''' Recode the MP3 file `path` in place via a temporary file.
      Return a `RecodeResult`.

      The file is recoded to `tmp_path_for(path,tmpdir)`.
      On success, if `doit` (default `True`), the temporary file replaces `path`,
      otherwise it is discarded.
      On failure the temporary file is discarded and `path` is untouched.
  '''
  tmppath = tmp_path_for(path, tmpdir)
  try:
    result = recode_file(path, tmppath, encoding)
    if result.ok and doit:
      with Pfx(path):
        try:
          replace_file(tmppath, path)
        except OSError as e:
          result.error = io_failure(e)
  finally:
    if existspath(tmppath):
      try:
        os.remove(tmppath)
      except OSError as e:
        warning("remove %r: %s", tmppath, e)
  return result

class ID3RecodeCommand(BaseCommand):
  ''' Recode Shift_JIS ID3v2.3 title, album and artist frames as UTF-8.
  '''

  @dataclass
  class Options(BaseCommand.Options):
    ''' Options for `ID3RecodeCommand`.
    '''
    tmpdir: Optional[str] = None

    # pylint: disable=use-dict-literal
    COMMON_OPT_SPECS = dict(
        **BaseCommand.Options.COMMON_OPT_SPECS,
        tmpdir_=(
            'tmpdir',
            'Directory for the temporary output files.',
        ),
    )

  def cmd_recode(self, argv):
    ''' Usage: {cmd} paths...
          Recode the MP3 files named by paths in place.
          Directory paths recode the .mp3 files directly within them.
          With the leading -n option the files are recoded
          to the temporary directory and discarded.
    '''
    if not argv:
      raise GetoptError("missing paths")
    options = self.options
    xit = 0
    for path in argv:
      try:
        mp3paths = list(mp3_paths(path))
      except OSError as e:
        error("%s", e)
        xit = 1
        continue
      for mp3path in mp3paths:
        result = recode_path(
            mp3path, tmpdir=options.tmpdir, doit=options.doit
        )
        if not result:
          error("%s: %s: %s", mp3path, result.kind, result.error)
          xit = 1
          continue
        stats = result.stats
        if stats.recoded:
          info(
              "%s: recoded %s, size %d => %d",
              mp3path,
              ",".join(frame_id.decode('ascii') for frame_id in stats.recoded),
              stats.body_size,
              stats.final_body_size,
          )
        elif options.verbose:
          info("%s: unchanged", mp3path)
    return xit

  def cmd_frames(self, argv):
    ''' Usage: {cmd} paths...
          List the ID3v2.3 frames of the named MP3 files
          and whether each would be recoded.
    '''
    if not argv:
      raise GetoptError("missing paths")
    xit = 0
    first_print = True
    for path in argv:
      with Pfx(path):
        try:
          bfr = CornuCopyBuffer.from_filename(path)
        except OSError as e:
          error(e)
          xit = 1
          continue
        with closing(bfr):
          try:
            frames = list(self.frame_listing(bfr))
          except (ID3RecodeError, ValueError, EOFError) as e:
            warning("%s", e)
            xit = 1
            continue
      if not first_print:
        print()
      first_print = False
      print(path)
      for line in frames:
        print(' ', line)
    return xit

  @staticmethod
  def frame_listing(bfr):
    ''' Yield a description line for each frame in the tag at the front of `bfr`.
    '''
    header = ID3V23TagHeader.parse(bfr)
    yield "ID3v2.%d.%d body_size=%d" % (header.v1, header.v2, header.body_size)
    for frame_header in walk_frames(bfr, header.body_size):
      if not frame_header.is_valid:
        yield "padding at offset %d" % (bfr.offset - frame_header.length,)
        break
      if frame_header.is_recodable:
        body = bfr.take(frame_header.size)
        encoding_s = (
            TEXT_ENCODING_NAMES.get(body[0], "0x%02x" % (body[0],))
            if body else 'empty'
        )
        yield "%s size=%d flags=0x%04x encoding=%s%s" % (
            frame_header.frame_id_s,
            frame_header.size,
            frame_header.flags,
            encoding_s,
            " recode" if transcode_text(body) is not None else "",
        )
      else:
        bfr.skip(frame_header.size)
        yield "%s size=%d flags=0x%04x" % (
            frame_header.frame_id_s, frame_header.size, frame_header.flags
        )

  def cmd_test(self, argv):
    ''' Usage: {cmd} [testsuite-args...]
          Run unit tests.
    '''
    from .id3recode_tests import selftest  # pylint: disable=import-outside-toplevel
    selftest([basename(self.options.cmd or 'id3recode')] + argv)

if __name__ == '__main__':
  sys.exit(main(sys.argv))
