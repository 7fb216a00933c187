import pytest

from bintel.lib.intel.opcodes import Opcode
from bintel.lib.intel.parser import parse
from bintel.lib.intel.printer import is_string_form, mnemonic, render


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x90", "nop"),
        (b"\xc3", "ret"),
        (b"\x48\xc7\xc0\x05\x00\x00\x00", "mov rax, 0x5"),
        (b"\x48\x8b\x45\xf8", "mov rax, qword ptr [rbp - 0x8]"),
        (b"\x8b\x05\x10\x00\x00\x00", "mov eax, dword ptr [rip + 0x10]"),
        (b"\x64\x48\x8b\x04\x25\x28\x00\x00\x00", "mov rax, qword ptr fs:[0x28]"),
        (b"\x48\x8d\x04\x88", "lea rax, [rax + rcx*4]"),
        (b"\x48\x83\xec\x08", "sub rsp, 0x8"),
        (b"\x83\xc0\xff", "add eax, -0x1"),
        (b"\xc2\x08\x00", "ret 0x8"),
        (b"\xf3\xa4", "rep movsb byte ptr [rdi], byte ptr [rsi]"),
        (b"\xf2\xae", "repne scasb al, byte ptr [rdi]"),
        (b"\xf3\xa6", "repe cmpsb byte ptr [rsi], byte ptr [rdi]"),
        (b"\xf0\xff\x00", "lock inc dword ptr [rax]"),
        (b"\xf3\x0f\x10\xc1", "movss xmm0, xmm1"),
        (b"\xf2\x0f\x10\xc1", "movsd xmm0, xmm1"),
        (b"\xf3\x90", "nop"),
        (b"\x62\xf1\x7c\xc9\x58\xc2", "vaddps zmm0 {k1}{z}, zmm0, zmm2"),
        (b"\x62\xf1\x7c\x48\x58\xc2", "vaddps zmm0, zmm0, zmm2"),
    ],
)
def test_render(data, expected):
    assert render(parse(data)) == expected


def test_render_call_target():
    insn = parse(b"\xe8\x00\x00\x00\x00", address=0x1000)
    assert render(insn) == "call 0x1005"


def test_render_far_jump():
    insn = parse(b"\xea\x78\x56\x34\x12\x00\x10", mode=32)
    assert render(insn) == "jmp far 0x1000:0x12345678"


def test_render_16bit_memory():
    insn = parse(b"\x8b\x00", mode=16)
    assert render(insn) == "mov ax, word ptr [bx + si]"


def test_mnemonic_names():
    assert mnemonic(Opcode.CALLNear) == "call"
    assert mnemonic(Opcode.RETFar) == "retf"
    assert mnemonic(Opcode.MOV) == "mov"


def test_string_form_excludes_sse_namesakes():
    assert is_string_form(parse(b"\xa5").info)
    assert not is_string_form(parse(b"\xf2\x0f\x10\xc1").info)


@pytest.mark.parametrize(
    "data, mode, expected",
    [
        (b"\x66\x6a\xff", 64, "push word -0x1"),
        (b"\x66\x68\x34\x12", 64, "push word 0x1234"),
        (b"\x66\x6a\x01", 32, "push word 0x1"),
        (b"\x66\x6a\x01", 16, "push dword 0x1"),
        (b"\x6a\xff", 64, "push -0x1"),
        (b"\x66\x50", 64, "push ax"),
    ],
)
def test_render_push_width_override(data, mode, expected):
    assert render(parse(data, mode=mode)) == expected


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\xf2\x0f\x7c\xc1", "haddps xmm0, xmm1"),
        (b"\x66\x0f\x7c\xc1", "haddpd xmm0, xmm1"),
        (b"\xf2\x0f\xd0\xc1", "addsubps xmm0, xmm1"),
        (b"\xc5\xfc\x77", "vzeroall"),
        (b"\xc4\xe3\x7d\x18\xc1\x01", "vinsertf128 ymm0, ymm0, xmm1, 0x1"),
        (b"\xc4\xe3\x7d\x19\xc1\x01", "vextractf128 xmm1, ymm0, 0x1"),
        (b"\xc4\xe3\x75\x06\xc2\x20", "vperm2f128 ymm0, ymm1, ymm2, 0x20"),
        (b"\xc4\xe3\x71\x4a\xc2\x30", "vblendvps xmm0, xmm1, xmm2, xmm3"),
        (b"\xc4\xe2\xf1\x98\xc2", "vfmadd132pd xmm0, xmm1, xmm2"),
        (b"\xc4\xe2\x71\x99\xc2", "vfmadd132ss xmm0, xmm1, xmm2"),
        (b"\xc4\xe2\x75\xb6\xc2", "vfmaddsub231ps ymm0, ymm1, ymm2"),
        (b"\xc4\xe2\x69\x90\x04\x88", "vpgatherdd xmm0, dword ptr [rax + xmm1*4], xmm2"),
        (b"\x62\xf1\x7d\x48\xef\xc0", "vpxord zmm0, zmm0, zmm0"),
        (b"\x62\xf3\xfd\x48\x3b\xc1\x01", "vextracti64x4 ymm1, zmm0, 0x1"),
        (b"\x62\xf1\x74\x48\xc2\xd2\x01", "vcmpps k2, zmm1, zmm2, 0x1"),
        (b"\x62\xf1\x75\x48\x72\xe2\x05", "vpsrad zmm1, zmm2, 0x5"),
        (b"\x62\xf2\x7e\x48\x33\xc1", "vpmovdw ymm1, zmm0"),
        (b"\x62\xf2\x7e\x48\x38\xc1", "vpmovm2d zmm0, k1"),
        (b"\x62\xf2\xfd\x49\x90\x04\xc8", "vpgatherdq zmm0 {k1}, qword ptr [rax + ymm1*8]"),
    ],
)
def test_render_vector_extensions(data, expected):
    assert render(parse(data)) == expected


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\xc5\xf8\x92\xc8", "kmovw k1, eax"),
        (b"\xc4\xe1\xf8\x90\x01", "kmovq k0, qword ptr [rcx]"),
        (b"\xc5\xf4\x41\xc2", "kandw k0, k1, k2"),
        (b"\xc4\xe3\xf9\x30\xc1\x02", "kshiftrw k0, k1, 0x2"),
    ],
)
def test_render_opmask_instructions(data, expected):
    assert render(parse(data)) == expected


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\xf3\x0f\x1e\xc8", "rdssp eax"),
        (b"\xf3\x48\x0f\x1e\xc8", "rdssp rax"),
        (b"\xf3\x0f\x01\xe8", "setssbsy"),
        (b"\xf3\x0f\xae\xe8", "incssp eax"),
        (b"\x0f\xae\xe8", "lfence"),
        (b"\x0f\x01\xcf", "encls"),
        (b"\x0f\x01\xd7", "enclu"),
        (b"\x66\x0f\x38\x80\x08", "invept rcx, xmmword ptr [rax]"),
        (b"\x0f\x38\xf6\x08", "wrss dword ptr [rax], ecx"),
        (b"\x0f\x0d\x08", "prefetchw byte ptr [rax]"),
        (b"\x0f\x0d\x10", "prefetchwt1 byte ptr [rax]"),
    ],
)
def test_render_system_extensions(data, expected):
    assert render(parse(data)) == expected
